"""Pytest configuration and fixtures.

Shared fixtures use fake implementations (FakePasswordHasher,
FakeTokenService, FakeUnitOfWork): no real crypto, no database, and a
fresh fake per test.
"""

import os

# Settings are read when app.main is imported; provide a signing secret first
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789-abcdefghijklmnop")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402

from app.application.services.auth_service import AuthService  # noqa: E402
from app.application.services.comment_service import CommentService  # noqa: E402
from app.domain.entities.identity import Identity  # noqa: E402
from app.domain.entities.user import User  # noqa: E402
from tests.fakes.password_hasher_fake import FakePasswordHasher  # noqa: E402
from tests.fakes.token_service_fake import FakeTokenService  # noqa: E402
from tests.fakes.unit_of_work_fake import FakeUnitOfWork  # noqa: E402


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """Provide a FakePasswordHasher for tests."""
    return FakePasswordHasher()


@pytest.fixture
def fake_token_service() -> FakeTokenService:
    """Provide a FakeTokenService with the default 24h lifetime."""
    return FakeTokenService()


@pytest.fixture
def sample_user() -> User:
    """
    A registered user.

    The password_hash uses the FakePasswordHasher format: "HASHED:password123"
    """
    return User(
        id=1,
        username="alice",
        password_hash="HASHED:password123",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def another_user() -> User:
    """Create another sample user for testing."""
    return User(
        id=2,
        username="bob",
        password_hash="HASHED:password456",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def alice(sample_user) -> Identity:
    return Identity(user_id=sample_user.id, username=sample_user.username)


@pytest.fixture
def bob(another_user) -> Identity:
    return Identity(user_id=another_user.id, username=another_user.username)


@pytest.fixture
def fake_uow():
    """Provide a fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_users(sample_user, another_user):
    """Provide a FakeUnitOfWork pre-populated with alice and bob."""
    return FakeUnitOfWork(initial_users=[sample_user, another_user])


@pytest.fixture
def auth_service(fake_uow_with_users, fake_token_service, fake_password_hasher):
    """Provide AuthService with fake dependencies."""

    def uow_factory():
        return fake_uow_with_users

    return AuthService(
        uow_factory=uow_factory,
        token_service=fake_token_service,
        password_hasher=fake_password_hasher,
        access_token_expire_minutes=24 * 60,
        password_min_length=8,
    )


@pytest.fixture
def comment_service(fake_uow_with_users):
    """Provide CommentService backed by the shared fake unit of work."""

    def uow_factory():
        return fake_uow_with_users

    return CommentService(uow_factory=uow_factory)
