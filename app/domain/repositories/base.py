"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface shared by every aggregate.

    This interface belongs to the DOMAIN layer and defines the contract
    for data access without any implementation details. Write operations
    are declared per aggregate because each one carries its own atomicity
    guarantee (unique-key insert, owner-conditional update, ...).

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass
