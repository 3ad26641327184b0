"""API routers for Ridehail."""

from .captains import router as captains_router
from .health import router as health_router
from .users import router as users_router

__all__ = ["captains_router", "users_router", "health_router"]
