"""
User (rider) account model.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """Rider account, resolved by the auth gate from a token's ``_id`` claim."""

    __tablename__ = "users"

    firstname: Mapped[str] = mapped_column(String(50), nullable=False)
    lastname: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    socket_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    __table_args__ = (
        CheckConstraint("length(firstname) <= 50", name="ck_users_firstname_len"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"

    @property
    def fullname(self) -> dict:
        return {"firstname": self.firstname, "lastname": self.lastname}
