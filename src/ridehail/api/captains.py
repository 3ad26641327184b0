"""Captain API endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories.captain_repository import CaptainRepository
from ..core.schemas.captain import CaptainRegisterRequest, CaptainRegisterResponse, CaptainResponse
from ..core.schemas.common import MessageResponse
from ..core.services import CaptainService
from ..database import get_db_session
from ..security import create_user_token, hash_password

router = APIRouter(prefix="/captains", tags=["captains"])


@router.post(
    "/register",
    response_model=CaptainRegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def register(request: CaptainRegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a captain and return an access token for it."""
    if await CaptainRepository(session).is_email_taken(request.email):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Captain already exist"}
        )

    captain_data = request.model_dump()
    # the registrar stores the password as given
    captain_data["password"] = hash_password(request.password)

    captain = await CaptainService(session).create_captain(captain_data)
    # same token format as riders; the rider gate resolves it to no user
    token = create_user_token(captain.id)

    return CaptainRegisterResponse(token=token, captain=CaptainResponse.model_validate(captain))
