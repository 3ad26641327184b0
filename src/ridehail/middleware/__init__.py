"""Middleware for authentication and other cross-cutting concerns."""

from .auth import AuthGate, auth_user, extract_token, get_auth_gate
from .errors import install_exception_handlers

__all__ = [
    "AuthGate",
    "auth_user",
    "extract_token",
    "get_auth_gate",
    "install_exception_handlers",
]
