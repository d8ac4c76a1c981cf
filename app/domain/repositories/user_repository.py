"""User repository interface (credential store)."""

from abc import abstractmethod

from app.domain.entities.user import User
from app.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    Credential store contract.

    Uniqueness of the username is enforced by the store itself, so callers
    never perform a read-then-write check that two concurrent
    registrations could both pass.
    """

    @abstractmethod
    async def create_if_absent(self, user: User) -> User | None:
        """
        Insert a user unless the username is already taken.

        Args:
            user: New user (without id)

        Returns:
            The persisted user with generated fields, or None on conflict
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """
        Find a user by their normalized username.

        Args:
            username: The user's unique key

        Returns:
            User if found, None otherwise
        """
        pass
