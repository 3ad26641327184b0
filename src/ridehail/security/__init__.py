"""Security utilities."""

from .jwt import SUBJECT_CLAIM, create_access_token, create_user_token, decode_access_token
from .password import hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "SUBJECT_CLAIM",
    "create_access_token",
    "create_user_token",
    "decode_access_token",
]
