# Revoked access tokens
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class BlacklistToken(BaseModel):
    """Raw access token revoked at logout.

    Looked up by the exact token string, not by its decoded claims.
    ``expires_at`` mirrors the token's ``exp``; the row can go once it passes.
    """

    __tablename__ = "blacklist_tokens"

    token: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_blacklist_tokens_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        token_preview = f"{self.token[:8]}..." if self.token else "None"
        return f"<BlacklistToken(token={token_preview})>"
