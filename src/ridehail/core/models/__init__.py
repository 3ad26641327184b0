"""
Database models for the Ridehail backend.

Models included:
    - User: rider account resolved by the auth gate
    - Captain: driver account with vehicle details
    - BlacklistToken: access tokens revoked at logout
"""

from .base import BaseModel
from .blacklist_token import BlacklistToken
from .captain import Captain
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Captain",
    "BlacklistToken",
]
