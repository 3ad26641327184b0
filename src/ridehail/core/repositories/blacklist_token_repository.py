"""Blacklist token repository for database operations."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.blacklist_token import BlacklistToken


class BlacklistTokenRepository:
    """Repository for revoked access tokens."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[BlacklistToken]:
        """Get blacklist entry by raw token string."""
        stmt = select(BlacklistToken).where(BlacklistToken.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_token(self, token: str, expires_at: Optional[datetime] = None) -> BlacklistToken:
        """Blacklist a token; adding the same token twice is a no-op."""
        existing = await self.get_by_token(token)
        if existing:
            return existing

        entry = BlacklistToken(token=token, expires_at=expires_at)
        self.session.add(entry)
        try:
            await self.session.commit()
        except IntegrityError:
            # concurrent logout with the same token won the insert
            await self.session.rollback()
            existing = await self.get_by_token(token)
            if existing is None:
                raise
            return existing

        await self.session.refresh(entry)
        return entry

    async def delete_expired(self, now: Optional[datetime] = None) -> int:
        """Delete entries whose token has expired.

        Entries without an expiry are kept.
        """
        now = now or datetime.now(timezone.utc)
        stmt = delete(BlacklistToken).where(
            and_(BlacklistToken.expires_at.is_not(None), BlacklistToken.expires_at < now)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
