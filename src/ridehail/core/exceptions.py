"""Domain exceptions shared by the auth gate and the services."""

from fastapi import status


class AuthenticationError(Exception):
    """Request could not be authenticated.

    Every subclass maps to a 401 with ``{"message": ...}`` in the body.
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredential(AuthenticationError):
    """No token in the Authorization header nor in the cookie."""

    message = "No token found"


class RevokedCredential(AuthenticationError):
    """Token is present in the blacklist store."""

    message = "Token is blacklisted"


class InvalidCredential(AuthenticationError):
    """Token failed verification.

    ``reason`` keeps the internal failure kind (expired, malformed, ...);
    the client always sees the same message.
    """

    message = "Invalid token"

    EXPIRED = "expired"
    MALFORMED = "malformed"
    BAD_SUBJECT = "bad_subject"
    LOOKUP_FAILED = "lookup_failed"

    def __init__(self, reason: str = MALFORMED):
        super().__init__()
        self.reason = reason


class CaptainValidationError(ValueError):
    """Captain registration payload is missing a required field."""

    def __init__(self, message: str = "All fields are required"):
        super().__init__(message)
        self.message = message
