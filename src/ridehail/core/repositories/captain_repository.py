"""Captain repository for database operations."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.captain import Captain


class CaptainRepository:
    """Repository for captain database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_captain(self, captain_data: dict) -> Captain:
        """Insert a captain from the nested registration shape."""
        captain = Captain.from_payload(**captain_data)
        self.session.add(captain)
        await self.session.commit()
        await self.session.refresh(captain)
        return captain

    async def get_by_email(self, email: str) -> Optional[Captain]:
        """Get captain by email."""
        stmt = select(Captain).where(Captain.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if a captain already registered with this email."""
        return await self.get_by_email(email) is not None
