"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from ..config import get_settings

# claim carrying the user id
SUBJECT_CLAIM = "_id"


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    *,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """Create a signed access token.

    Secret and algorithm default to the app settings.
    """
    settings = get_settings()
    to_encode = data.copy()

    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode.update({"exp": expire, "iat": now})
    return jwt.encode(
        to_encode,
        secret_key or settings.secret_key,
        algorithm=algorithm or settings.algorithm,
    )


def create_user_token(user_id: Any, **kwargs) -> str:
    """Access token whose subject is ``user_id``."""
    return create_access_token({SUBJECT_CLAIM: str(user_id)}, **kwargs)


def decode_access_token(token: str, secret_key: str, algorithm: str) -> Dict[str, Any]:
    """Verify signature and expiry and return the claims.

    Raises ``jose.ExpiredSignatureError`` for expired tokens and
    ``jose.JWTError`` for everything else that fails verification,
    including a missing ``exp`` claim.
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm], options={"require_exp": True})
