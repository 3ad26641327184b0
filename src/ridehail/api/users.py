"""User endpoints behind the auth gate."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.models.user import User
from ..core.repositories.blacklist_token_repository import BlacklistTokenRepository
from ..core.schemas.common import MessageResponse
from ..core.schemas.user import UserResponse
from ..database import get_db_session
from ..middleware.auth import auth_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile", response_model=Optional[UserResponse])
async def get_profile(user: Optional[User] = Depends(auth_user)):
    """Profile of the authenticated user."""
    return user


@router.get("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    _user: Optional[User] = Depends(auth_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Blacklist the presented token and clear the auth cookie."""
    response.delete_cookie(get_settings().auth_cookie_name)
    expires_at = datetime.fromtimestamp(request.state.token_claims["exp"], tz=timezone.utc)
    await BlacklistTokenRepository(session).add_token(request.state.token, expires_at=expires_at)
    return {"message": "Logged out"}
