"""Service layer."""

from .captain_service import CaptainService, validate_captain_data
from .health_service import HealthService

__all__ = ["CaptainService", "HealthService", "validate_captain_data"]
