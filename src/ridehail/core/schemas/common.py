"""
Shared response schemas
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain ``{"message": ...}`` body, also used for errors."""

    message: str = Field(description="Human-readable message")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall system health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: Dict[str, Any] = Field(description="Individual component health checks")
