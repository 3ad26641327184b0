"""Repository layer for data access."""

from .blacklist_token_repository import BlacklistTokenRepository
from .captain_repository import CaptainRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "CaptainRepository",
    "BlacklistTokenRepository",
]
