"""Captain registration service."""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import CaptainValidationError
from ..models.captain import Captain
from ..repositories.captain_repository import CaptainRepository

logger = logging.getLogger(__name__)

REQUIRED_VEHICLE_FIELDS = ("color", "plate", "capacity", "vehicleType")


def validate_captain_data(captain_data: Mapping[str, Any]) -> dict:
    """Return the four registration fields or raise ``CaptainValidationError``.

    Every required value must be truthy, so ``""``, ``0`` and ``None`` all fail.
    """
    fullname = captain_data.get("fullname") or {}
    vehicle = captain_data.get("vehicle") or {}
    email = captain_data.get("email")
    password = captain_data.get("password")

    if (
        not fullname.get("firstname")
        or not email
        or not password
        or not all(vehicle.get(field) for field in REQUIRED_VEHICLE_FIELDS)
    ):
        raise CaptainValidationError()

    return {
        "fullname": fullname,
        "email": email,
        "password": password,
        "vehicle": vehicle,
    }


class CaptainService:
    """Registers captains.

    The password must already be hashed; it is stored exactly as given.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.captain_repo = CaptainRepository(session)

    async def create_captain(self, captain_data: Mapping[str, Any]) -> Captain:
        """Validate and persist a new captain."""
        fields = validate_captain_data(captain_data)
        captain = await self.captain_repo.create_captain(fields)
        logger.info(f"Registered captain {captain.id}")
        return captain
