"""User response schemas."""

from datetime import datetime
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict

from .captain import FullName


class UserResponse(BaseModel):
    """Authenticated user profile."""

    id: uuid.UUID
    fullname: FullName
    email: str
    socket_id: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
