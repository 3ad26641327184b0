"""Exception handlers that shape error responses as ``{"message": ...}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import AuthenticationError, CaptainValidationError

logger = logging.getLogger(__name__)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def captain_validation_error_handler(request: Request, exc: CaptainValidationError) -> JSONResponse:
    logger.info(f"Captain validation failed for {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception for {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on ``app``."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(CaptainValidationError, captain_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
