# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import captains_router, health_router, users_router
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.repositories.blacklist_token_repository import BlacklistTokenRepository
from .database import AsyncSessionLocal, create_tables
from .middleware.errors import install_exception_handlers

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


async def purge_expired_blacklist_entries() -> int:
    """Drop blacklist entries whose token has expired on its own."""
    async with AsyncSessionLocal() as session:
        removed = await BlacklistTokenRepository(session).delete_expired()
    if removed:
        logger.info(f"Purged {removed} expired blacklist entries")
    return removed


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Ridehail application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # tests run against their own in-memory database
    if os.getenv("RIDEHAIL_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB setup due to RIDEHAIL_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise
        await purge_expired_blacklist_entries()

    logger.info(f"Server is running at port no: {settings.port}")
    yield

    logger.info("Shutting down Ridehail application")


app = FastAPI(
    title=settings.app_name,
    description="Ride-hailing backend: rider auth and captain registration",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

app.include_router(captains_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": settings.app_name, "version": __version__}


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run("ridehail.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
