"""User repository implementation using SQLAlchemy."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.user import User
from app.domain.repositories.user_repository import IUserRepository
from app.infrastructure.persistence.models.user_model import UserModel

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    It implements the IUserRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_id(self, id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == id)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()

    async def create_if_absent(self, user: User) -> Optional[User]:
        """
        Insert a user, relying on the unique index on username.

        A conflicting insert fails inside the database; the session is
        rolled back and None is returned. Registration is the only work in
        its transaction, so nothing else is lost by the rollback.
        """
        user_model = UserModel.from_entity(user)
        self._session.add(user_model)

        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            logger.debug("Username conflict on insert")
            return None

        await self._session.refresh(user_model)
        return user_model.to_entity()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()
