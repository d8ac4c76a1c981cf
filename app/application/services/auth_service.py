"""Authentication service - application layer business logic.

This service orchestrates authentication use cases:
1. Registration (policy checks + hashing + atomic insert)
2. Login (credential validation + token generation)
3. Request authentication (token → identity, no store access)
4. Get current user (token → stored user)

DEPENDENCY INVERSION in action:
- AuthService depends on ITokenService (abstraction)
- AuthService depends on IPasswordHasher (abstraction)
- AuthService depends on IUnitOfWork (abstraction)
- No dependencies on PyJWT, Argon2, or SQLAlchemy
"""

import logging
import secrets
from collections.abc import Callable

from app.application.dtos.auth_dto import LoginDTO, RegisterDTO, TokenDTO
from app.application.dtos.user_dto import UserDTO
from app.application.exceptions.exceptions import (
    InvalidCredentialsError,
    UnauthorizedError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from app.application.services.store_deadline import store_deadline
from app.domain.entities.identity import Identity
from app.domain.entities.user import User, normalize_username
from app.domain.exceptions import (
    ExpiredTokenException,
    InvalidTokenException,
    MalformedHashException,
)
from app.domain.repositories.unit_of_work import IUnitOfWork
from app.domain.services.password_hasher import IPasswordHasher
from app.domain.services.token_service import ITokenService

logger = logging.getLogger(__name__)

MAX_USERNAME_LENGTH = 150


class AuthService:
    """
    Authentication service encapsulating auth-related use cases.

    This service:
    1. Depends on abstractions (ITokenService, IPasswordHasher, IUnitOfWork)
    2. Holds no persistent state of its own
    3. Returns DTOs to the presentation layer
    4. Raises application exceptions (converted to HTTP by presentation)

    Testing:
    - Unit tests use FakeTokenService, FakePasswordHasher, FakeUnitOfWork
    - No PyJWT or database required in unit tests
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
        access_token_expire_minutes: int = 24 * 60,
        password_min_length: int = 8,
        store_timeout_seconds: float | None = None,
        timing_hash: str | None = None,
    ):
        """
        Initialize auth service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            token_service: Token generation/validation service (abstraction)
            password_hasher: Password hashing service (abstraction)
            access_token_expire_minutes: Lifetime of issued tokens
            password_min_length: Minimum accepted password length
            store_timeout_seconds: Deadline for each store interaction
            timing_hash: Hash verified when the username is unknown, so a miss
                costs as much as a wrong password. Generated if not given.
        """
        self._uow_factory = uow_factory
        self._token_service = token_service
        self._password_hasher = password_hasher
        self._access_token_expire_minutes = access_token_expire_minutes
        self._password_min_length = password_min_length
        self._store_timeout_seconds = store_timeout_seconds
        self._timing_hash = timing_hash or password_hasher.hash(secrets.token_urlsafe(32))

    async def register(self, dto: RegisterDTO) -> UserDTO:
        """
        Register a new user.

        Business rules:
        1. Username must be non-empty after normalization
        2. Password must meet the minimum length
        3. Username must be unique (enforced atomically by the store)

        Raises:
            ValidationError: If username or password fails the policy
            UserAlreadyExistsError: If the username is taken (never retried)
        """
        username = normalize_username(dto.username)
        if not username:
            raise ValidationError("Username cannot be empty")
        if len(username) > MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at most {MAX_USERNAME_LENGTH} characters long"
            )
        if len(dto.password) < self._password_min_length:
            raise ValidationError(
                f"Password must be at least {self._password_min_length} characters long"
            )

        user = User(username=username, password_hash=self._password_hasher.hash(dto.password))

        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                created = await uow.users.create_if_absent(user)
                if created is None:
                    logger.info("Registration rejected: username already taken")
                    raise UserAlreadyExistsError(f"Username {username} is already registered")

                await uow.commit()

        logger.info("Registered user %s", created.id)
        return UserDTO.from_entity(created)

    async def login(self, dto: LoginDTO) -> TokenDTO:
        """
        Authenticate user and issue an access token.

        An unknown username and a wrong password raise the same error, and
        both paths run one password verification. A corrupted stored hash
        is logged and answered the same way.

        Raises:
            InvalidCredentialsError: If username or password is incorrect
        """
        username = normalize_username(dto.username)

        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                user = await uow.users.get_by_username(username) if username else None

        if user is None:
            self._password_hasher.verify(dto.password, self._timing_hash)
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        try:
            password_ok = self._password_hasher.verify(dto.password, user.password_hash)
        except MalformedHashException:
            logger.error("Stored password hash for user %s is malformed", user.id)
            password_ok = False

        if not password_ok:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        assert user.id is not None
        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            username=user.username,
        )

        logger.info("User %s logged in", user.id)
        return TokenDTO(
            access_token=access_token,
            token_type="bearer",
            expires_in=self._access_token_expire_minutes * 60,
        )

    def authenticate(self, access_token: str | None) -> Identity:
        """
        Resolve the identity behind a bearer token.

        This is a pure capability check: signature and expiry only, no store
        access. Every failure collapses to UnauthorizedError, while the
        message still tells an expired token from a rejected one.

        Raises:
            UnauthorizedError: If the token is missing, invalid or expired
        """
        if not access_token:
            raise UnauthorizedError("Missing authorization credentials")

        try:
            token_data = self._token_service.verify_token(access_token)
        except ExpiredTokenException as exc:
            raise UnauthorizedError("Token has expired") from exc
        except InvalidTokenException as exc:
            raise UnauthorizedError("Invalid token") from exc

        return token_data.to_identity()

    async def get_current_user(self, access_token: str | None) -> UserDTO:
        """
        Get the currently authenticated user from an access token.

        Raises:
            UnauthorizedError: If token is missing, invalid or expired
            UserNotFoundError: If the user no longer exists
        """
        identity = self.authenticate(access_token)

        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                user = await uow.users.get_by_id(identity.user_id)

        if user is None:
            raise UserNotFoundError(f"User {identity.user_id} not found")

        return UserDTO.from_entity(user)
