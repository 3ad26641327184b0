"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os

# app lifespan must not touch the configured PostgreSQL database
os.environ["RIDEHAIL_SKIP_LIFESPAN_DB"] = "1"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.ridehail.core.models import BaseModel, User
from src.ridehail.database import get_db_session
from src.ridehail.main import app
from src.ridehail.security.jwt import create_user_token
from src.ridehail.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Fresh in-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session):
    """App with the DB dependency pointed at the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "firstname": "Asha",
        "lastname": "Verma",
        "email": "asha@example.com",
        "password": "TestPassword123!",
    }


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    user = User(
        firstname=test_user_data["firstname"],
        lastname=test_user_data["lastname"],
        email=test_user_data["email"],
        password=hash_password(test_user_data["password"]),
    )
    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)
    return user


@pytest.fixture
def user_token(test_user):
    """Valid access token for ``test_user``."""
    return create_user_token(test_user.id)


@pytest.fixture
def auth_headers(user_token):
    """Authorization header carrying ``user_token``."""
    return {"Authorization": f"Bearer {user_token}"}


@pytest.fixture
def captain_payload():
    """Complete captain registration body."""
    return {
        "fullname": {"firstname": "Ravi", "lastname": "Kumar"},
        "email": "ravi@example.com",
        "password": "hashed-elsewhere",
        "vehicle": {
            "color": "black",
            "plate": "MP04 AB 1234",
            "capacity": 4,
            "vehicleType": "car",
        },
    }
