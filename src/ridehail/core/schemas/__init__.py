"""
Pydantic schemas for the Ridehail API.
"""

from .captain import (
    CaptainRegisterRequest,
    CaptainRegisterResponse,
    CaptainResponse,
    FullName,
    Vehicle,
)
from .common import HealthCheckResponse, MessageResponse
from .user import UserResponse

__all__ = [
    "FullName",
    "Vehicle",
    "CaptainRegisterRequest",
    "CaptainRegisterResponse",
    "CaptainResponse",
    "UserResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
