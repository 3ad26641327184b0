"""Authentication gate.

Runs before a protected handler: pull the token from the ``Authorization``
header or the ``token`` cookie, reject it if it was blacklisted, verify it,
then load the user named by its ``_id`` claim onto ``request.state.user``.
Each failure stops the request with a 401.
"""

import logging
from typing import Any, Callable, Dict, Optional
from uuid import UUID

from fastapi import Depends, Request
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import InvalidCredential, MissingCredential, RevokedCredential
from ..core.models.user import User
from ..core.repositories.blacklist_token_repository import BlacklistTokenRepository
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security.jwt import SUBJECT_CLAIM, decode_access_token

logger = logging.getLogger(__name__)


def extract_token(request: Request, cookie_name: str = "token") -> Optional[str]:
    """Bearer token from the Authorization header, else the auth cookie.

    The header is split on whitespace and its second part taken; the
    scheme word itself is not checked.
    """
    header = request.headers.get("authorization")
    if header:
        parts = header.split()
        if len(parts) > 1 and parts[1]:
            return parts[1]
    return request.cookies.get(cookie_name) or None


class AuthGate:
    """FastAPI dependency that authenticates a request.

    Secret and algorithm are given at construction. Repository factories
    take the request's session and can be swapped in tests.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        *,
        cookie_name: str = "token",
        blacklist_repo_factory: Callable[[AsyncSession], BlacklistTokenRepository] = BlacklistTokenRepository,
        user_repo_factory: Callable[[AsyncSession], UserRepository] = UserRepository,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.cookie_name = cookie_name
        self.blacklist_repo_factory = blacklist_repo_factory
        self.user_repo_factory = user_repo_factory

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "AuthGate":
        return cls(
            settings.secret_key,
            settings.algorithm,
            cookie_name=settings.auth_cookie_name,
            **kwargs,
        )

    async def __call__(
        self, request: Request, session: AsyncSession = Depends(get_db_session)
    ) -> Optional[User]:
        token = extract_token(request, self.cookie_name)
        if not token:
            logger.info(f"Rejected {request.url.path}: no token")
            raise MissingCredential()

        blacklisted = await self.blacklist_repo_factory(session).get_by_token(token)
        if blacklisted:
            logger.info(f"Rejected {request.url.path}: token is blacklisted")
            raise RevokedCredential()

        try:
            claims = self.verify_token(token)
            user = await self.resolve_user(claims, session)
        except InvalidCredential as exc:
            logger.info(f"Rejected {request.url.path}: invalid token ({exc.reason})")
            raise

        request.state.user = user
        request.state.token = token
        request.state.token_claims = claims
        return user

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Claims of ``token`` once signature and expiry check out."""
        try:
            return decode_access_token(token, self.secret_key, self.algorithm)
        except ExpiredSignatureError as exc:
            raise InvalidCredential(InvalidCredential.EXPIRED) from exc
        except JWTError as exc:
            raise InvalidCredential(InvalidCredential.MALFORMED) from exc

    async def resolve_user(self, claims: Dict[str, Any], session: AsyncSession) -> Optional[User]:
        """Load the user named by verified ``claims``.

        A verified token whose user no longer exists resolves to ``None``.
        """
        subject = claims.get(SUBJECT_CLAIM)
        if subject is None:
            logger.warning("Verified token carries no subject, continuing without a user")
            return None

        try:
            user_id = UUID(str(subject))
        except ValueError as exc:
            raise InvalidCredential(InvalidCredential.BAD_SUBJECT) from exc

        try:
            user = await self.user_repo_factory(session).get_by_id(user_id)
        except SQLAlchemyError as exc:
            logger.error(f"User lookup failed for {user_id}: {exc}")
            raise InvalidCredential(InvalidCredential.LOOKUP_FAILED) from exc

        if user is None:
            # TODO: decide whether a deleted user should be a 401 instead of a pass-through
            logger.warning(f"Token subject {user_id} matches no user, continuing without a user")
        return user


def get_auth_gate() -> AuthGate:
    """Gate built from the current app settings."""
    return AuthGate.from_settings(get_settings())


# Dependency for protected routes
auth_user = get_auth_gate()
