"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where concrete implementations are
created and handed to the application services as abstractions:
- Argon2PasswordHasher for IPasswordHasher
- JWTTokenService for ITokenService, built once from Settings
- SQLAlchemy UnitOfWork for IUnitOfWork

The application layer never imports anything from here.
"""

import secrets
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.application.services.auth_service import AuthService
from app.application.services.comment_service import CommentService
from app.domain.entities.identity import Identity
from app.domain.repositories.unit_of_work import IUnitOfWork
from app.domain.services.password_hasher import IPasswordHasher
from app.domain.services.token_service import ITokenService
from app.infrastructure.config.settings import Settings, get_settings
from app.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from app.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from app.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from app.infrastructure.security.jwt_token_service import JWTTokenService


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None
_token_service: ITokenService | None = None
_timing_hash: str | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_password_hasher() -> IPasswordHasher:
    """
    Dependency that provides password hasher.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    return Argon2PasswordHasher()


def get_timing_hash(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> str:
    """Hash of a random secret, computed once, used for unknown-user logins."""
    global _timing_hash
    if _timing_hash is None:
        _timing_hash = password_hasher.hash(secrets.token_urlsafe(32))
    return _timing_hash


def get_token_service(settings: Settings = Depends(get_settings)) -> ITokenService:
    """
    Dependency that provides the token service.

    The signing secret is read from Settings exactly once, when the
    singleton is built; nothing else holds or reads it.
    """
    global _token_service
    if _token_service is None:
        _token_service = JWTTokenService(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            access_token_expire_minutes=settings.access_token_expire_minutes,
        )
    return _token_service


def get_auth_service(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
    timing_hash: str = Depends(get_timing_hash),
    session_factory: async_sessionmaker = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Dependency that provides AuthService.

    Dependency Graph:
        FastAPI endpoint
            → get_auth_service()
                → get_password_hasher() → Argon2PasswordHasher
                → get_token_service() → JWTTokenService(Settings.secret_key)
                → get_session_factory() → get_database_engine() → Settings
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return AuthService(
        uow_factory=uow_factory,
        token_service=token_service,
        password_hasher=password_hasher,
        access_token_expire_minutes=settings.access_token_expire_minutes,
        password_min_length=settings.password_min_length,
        store_timeout_seconds=settings.store_timeout_seconds,
        timing_hash=timing_hash,
    )


def get_comment_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> CommentService:
    """Dependency that provides CommentService."""

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return CommentService(
        uow_factory=uow_factory,
        store_timeout_seconds=settings.store_timeout_seconds,
    )


# auto_error=False lets AuthService answer 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Extract the raw token from ``Authorization: Bearer <token>``."""
    if credentials is None:
        return None
    return credentials.credentials


def get_current_identity(
    access_token: str | None = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """
    Authentication gate for protected routes.

    Resolves the bearer token to an Identity, or raises UnauthorizedError
    (401) before the route handler runs. Only the token signature and expiry
    are checked; the store is never touched here.

    Usage in endpoints:
        @router.post("/comments")
        async def create(identity: CurrentIdentity, ...):
            ...
    """
    return auth_service.authenticate(access_token)


def get_optional_identity(
    access_token: str | None = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity | None:
    """
    Identity for public routes that personalise their answer.

    No token means an anonymous caller. A token that is sent but invalid
    or expired is still a 401.
    """
    if access_token is None:
        return None
    return auth_service.authenticate(access_token)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Identity | None, Depends(get_optional_identity)]
