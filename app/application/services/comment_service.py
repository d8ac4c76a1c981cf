"""Comment service - application layer business logic.

Ownership rules:
- Any authenticated identity may create a comment on any resource.
- Only the owner may update or delete a comment. A missing comment is
  reported as not found, an existing one owned by someone else as
  forbidden. Listing is public, so existence is not a secret.
- Reading is public.
"""

import logging
from collections.abc import Callable

from app.application.dtos.comment_dto import (
    CommentDTO,
    CreateCommentDTO,
    LikeDTO,
    UpdateCommentDTO,
)
from app.application.exceptions import (
    CommentNotFoundError,
    ForbiddenError,
    ValidationError,
)
from app.application.services.store_deadline import store_deadline
from app.domain.entities.comment import Comment
from app.domain.entities.identity import Identity
from app.domain.exceptions import InvalidEntityStateException
from app.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class CommentService:
    """
    Comment service encapsulating comment-related use cases.

    Owner checks are delegated to the store's conditional writes
    (``update_if_owner`` / ``delete_if_owner``). Only when a write matches
    nothing does the service read the comment, to pick the error.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        store_timeout_seconds: float | None = None,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            store_timeout_seconds: Deadline for each store interaction
        """
        self._uow_factory = uow_factory
        self._store_timeout_seconds = store_timeout_seconds

    async def create_comment(self, identity: Identity, dto: CreateCommentDTO) -> CommentDTO:
        """
        Create a comment owned by ``identity``.

        Raises:
            ValidationError: If the body is empty or the parent belongs to
                another resource
            CommentNotFoundError: If parent_id names no live comment
        """
        try:
            comment = Comment(
                resource_id=dto.resource,
                owner_id=identity.user_id,
                owner_username=identity.username,
                body=dto.body,
                parent_id=dto.parent_id,
            )
        except InvalidEntityStateException as exc:
            raise ValidationError(exc.message) from exc

        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                if comment.parent_id is not None:
                    parent = await uow.comments.get_by_id(comment.parent_id)
                    if parent is None:
                        raise CommentNotFoundError(
                            f"Parent comment {comment.parent_id} not found"
                        )
                    if parent.resource_id != comment.resource_id:
                        raise ValidationError(
                            "Parent comment belongs to a different resource"
                        )

                created = await uow.comments.add(comment)
                await uow.commit()

        logger.info(
            "User %s created comment %s on resource %s",
            identity.user_id,
            created.id,
            created.resource_id,
        )
        return CommentDTO.from_entity(created)

    async def get_comment(self, comment_id: int) -> CommentDTO:
        """
        Retrieve a live comment by ID.

        Raises:
            CommentNotFoundError: If the comment doesn't exist
        """
        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                comment = await uow.comments.get_by_id(comment_id)

        if comment is None:
            raise CommentNotFoundError(f"Comment {comment_id} not found")

        return CommentDTO.from_entity(comment)

    async def list_comments(
        self,
        resource_id: str,
        skip: int = 0,
        limit: int = 50,
        viewer: Identity | None = None,
    ) -> list[CommentDTO]:
        """
        List live comments of a resource, oldest first.

        Args:
            resource_id: Resource identifier
            skip: Number of comments to skip
            limit: Maximum number of comments to return (capped)
            viewer: Caller, if authenticated; marks the comments they like
        """
        skip = max(skip, 0)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)

        liked: set[int] = set()
        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                comments = await uow.comments.list_by_resource(
                    resource_id, skip=skip, limit=limit
                )
                if viewer is not None and comments:
                    liked = await uow.comments.liked_by(
                        viewer.user_id, [comment.id for comment in comments]
                    )

        return [
            CommentDTO.from_entity(comment, liked=comment.id in liked)
            for comment in comments
        ]

    async def count_comments(self, resource_id: str) -> int:
        """Number of live comments on a resource, across all pages."""
        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                return await uow.comments.count_by_resource(resource_id)

    async def update_comment(
        self, comment_id: int, identity: Identity, dto: UpdateCommentDTO
    ) -> CommentDTO:
        """
        Replace the body of a comment owned by ``identity``.

        Raises:
            ValidationError: If the new body is empty after trimming
            CommentNotFoundError: If the comment doesn't exist
            ForbiddenError: If the comment belongs to someone else
        """
        body = dto.body.strip()
        if not body:
            raise ValidationError("Comment body cannot be empty.")

        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                updated = await uow.comments.update_if_owner(
                    comment_id, identity.user_id, body
                )
                if updated is None:
                    await self._raise_not_found_or_forbidden(uow, comment_id, identity)

                await uow.commit()

        assert updated is not None
        logger.info("User %s updated comment %s", identity.user_id, comment_id)
        return CommentDTO.from_entity(updated)

    async def delete_comment(self, comment_id: int, identity: Identity) -> None:
        """
        Soft-delete a comment owned by ``identity``.

        Raises:
            CommentNotFoundError: If the comment doesn't exist
            ForbiddenError: If the comment belongs to someone else
        """
        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                deleted = await uow.comments.delete_if_owner(comment_id, identity.user_id)
                if not deleted:
                    await self._raise_not_found_or_forbidden(uow, comment_id, identity)

                await uow.commit()

        logger.info("User %s deleted comment %s", identity.user_id, comment_id)

    async def toggle_like(self, comment_id: int, identity: Identity) -> LikeDTO:
        """
        Like a comment, or remove the like if ``identity`` already liked it.

        Raises:
            CommentNotFoundError: If the comment doesn't exist
        """
        async with store_deadline(self._store_timeout_seconds):
            async with self._uow_factory() as uow:
                if await uow.comments.get_by_id(comment_id) is None:
                    raise CommentNotFoundError(f"Comment {comment_id} not found")

                likes, liked = await uow.comments.toggle_like(comment_id, identity.user_id)
                await uow.commit()

        return LikeDTO(comment_id=comment_id, likes=likes, liked=liked)

    async def _raise_not_found_or_forbidden(
        self, uow: IUnitOfWork, comment_id: int, identity: Identity
    ) -> None:
        comment = await uow.comments.get_by_id(comment_id)
        # An owned comment that missed the conditional write was deleted meanwhile
        if comment is None or comment.is_owned_by(identity):
            raise CommentNotFoundError(f"Comment {comment_id} not found")

        logger.warning(
            "User %s denied write access to comment %s owned by %s",
            identity.user_id,
            comment_id,
            comment.owner_id,
        )
        raise ForbiddenError("Only the author may modify this comment")
