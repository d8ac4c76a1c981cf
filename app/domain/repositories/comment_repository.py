"""Comment repository interface."""

from abc import abstractmethod

from app.domain.entities.comment import Comment
from app.domain.repositories.base import IRepository


class ICommentRepository(IRepository[Comment]):
    """
    Comment store contract.

    Mutations are conditional on ownership and applied by the store in a
    single statement, so an update or delete never acts on a comment whose
    owner was checked in an earlier, separate read.

    ``get_by_id`` only returns live (not soft-deleted) comments.
    """

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Persist a new comment and return it with generated fields."""
        pass

    @abstractmethod
    async def update_if_owner(
        self, comment_id: int, owner_id: int, body: str
    ) -> Comment | None:
        """
        Replace the body of a live comment owned by ``owner_id``.

        Returns:
            The updated comment, or None if no live comment matched both
            the id and the owner
        """
        pass

    @abstractmethod
    async def delete_if_owner(self, comment_id: int, owner_id: int) -> bool:
        """
        Soft-delete a live comment owned by ``owner_id``.

        Returns:
            True if a comment was deleted, False if nothing matched
        """
        pass

    @abstractmethod
    async def list_by_resource(
        self, resource_id: str, skip: int = 0, limit: int = 50
    ) -> list[Comment]:
        """
        List live comments of a resource, oldest first.

        Ordering is by creation time, then id, ascending.
        """
        pass

    @abstractmethod
    async def toggle_like(self, comment_id: int, user_id: int) -> tuple[int, bool]:
        """
        Add the user's like to a live comment, or remove it if present.

        Returns:
            (new like count, whether the user now likes the comment)
        """
        pass

    @abstractmethod
    async def count_by_resource(self, resource_id: str) -> int:
        """Number of live comments on a resource."""
        pass

    @abstractmethod
    async def liked_by(self, user_id: int, comment_ids: list[int]) -> set[int]:
        """Subset of ``comment_ids`` the user currently likes."""
        pass
