"""Integration test fixtures.

Provides fixtures for integration testing with a real database and the
FastAPI application. Uses a SQLite in-memory database for fast, isolated
tests; StaticPool keeps every session on the one connection that holds it.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.infrastructure.persistence.database import create_schema
from app.main import app
from app.presentation.dependencies import (
    get_password_hasher,
    get_session_factory,
    get_timing_hash,
)
from tests.fakes.password_hasher_fake import FakePasswordHasher

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_schema(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine):
    """Create a test session factory."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def client(test_session_factory) -> AsyncGenerator[AsyncClient]:
    """
    Create an HTTP client bound to the application with the test database.

    Argon2 is swapped for FakePasswordHasher; the timing hash is overridden
    with it so both stay in the same format.
    """
    hasher = FakePasswordHasher()

    app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_timing_hash] = lambda: hasher.hash("timing-only")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


async def _register_and_login(client: AsyncClient, username: str, password: str) -> dict:
    """Register a user, log in, and return the Authorization header."""
    response = await client.post(
        "/api/auth/register", json={"username": username, "password": password}
    )
    assert response.status_code == 201, response.text

    response = await client.post(
        "/api/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def alice_headers(client) -> dict:
    return await _register_and_login(client, "alice", "secret123")


@pytest_asyncio.fixture
async def bob_headers(client) -> dict:
    return await _register_and_login(client, "bob", "hunter2hunter2")


@pytest_asyncio.fixture
async def login_as(client):
    """Factory fixture: ``await login_as(username, password)`` -> auth headers."""

    async def _login_as(username: str, password: str) -> dict:
        return await _register_and_login(client, username, password)

    return _login_as
