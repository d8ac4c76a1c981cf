"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.repositories.comment_repository import ICommentRepository
    from app.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    The UoW acts as a facade providing access to all repositories
    within a single transactional boundary. Implementations translate
    driver-specific failures into StorageException on exit.
    """

    users: "IUserRepository"
    comments: "ICommentRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Start a transaction/session and bind the repositories to it."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        Uncommitted work is rolled back when an exception occurred.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
