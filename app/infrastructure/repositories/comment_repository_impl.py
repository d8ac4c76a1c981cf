"""Comment repository implementation using SQLAlchemy."""

import logging
from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.comment import Comment
from app.domain.repositories.comment_repository import ICommentRepository
from app.infrastructure.persistence.models.comment_model import (
    CommentLikeModel,
    CommentModel,
)

logger = logging.getLogger(__name__)

# Dialects whose INSERT supports ON CONFLICT DO NOTHING
_CONFLICT_IGNORING_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CommentRepository(ICommentRepository):
    """
    SQLAlchemy implementation of ICommentRepository.

    Owner-conditional writes are single UPDATE statements filtered on
    id, owner_id and is_deleted; the affected row count tells whether
    the condition held.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, id: int) -> Optional[Comment]:
        """Get a live comment by ID."""
        result = await self._session.execute(
            select(CommentModel).where(
                CommentModel.id == id,
                CommentModel.is_deleted.is_(False),
            )
        )
        comment_model = result.scalar_one_or_none()

        if comment_model is None:
            return None

        return comment_model.to_entity()

    async def add(self, comment: Comment) -> Comment:
        """Add a new comment."""
        comment_model = CommentModel.from_entity(comment)

        self._session.add(comment_model)
        await self._session.flush()
        await self._session.refresh(comment_model)

        return comment_model.to_entity()

    async def update_if_owner(
        self, comment_id: int, owner_id: int, body: str
    ) -> Optional[Comment]:
        """Replace the body if the live comment belongs to owner_id."""
        result = await self._session.execute(
            update(CommentModel)
            .where(
                CommentModel.id == comment_id,
                CommentModel.owner_id == owner_id,
                CommentModel.is_deleted.is_(False),
            )
            .values(body=body, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            return None

        # Drop any stale identity-map copy before reading the new row
        self._session.expire_all()
        return await self.get_by_id(comment_id)

    async def delete_if_owner(self, comment_id: int, owner_id: int) -> bool:
        """Soft-delete the live comment if it belongs to owner_id."""
        result = await self._session.execute(
            update(CommentModel)
            .where(
                CommentModel.id == comment_id,
                CommentModel.owner_id == owner_id,
                CommentModel.is_deleted.is_(False),
            )
            .values(is_deleted=True, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def list_by_resource(
        self, resource_id: str, skip: int = 0, limit: int = 50
    ) -> list[Comment]:
        """List live comments of a resource, oldest first."""
        result = await self._session.execute(
            select(CommentModel)
            .where(
                CommentModel.resource_id == resource_id,
                CommentModel.is_deleted.is_(False),
            )
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return [model.to_entity() for model in result.scalars().all()]

    async def toggle_like(self, comment_id: int, user_id: int) -> tuple[int, bool]:
        """Add or remove the user's like and recount the cached total."""
        removed = await self._session.execute(
            delete(CommentLikeModel).where(
                CommentLikeModel.comment_id == comment_id,
                CommentLikeModel.user_id == user_id,
            )
        )

        liked = removed.rowcount == 0
        if liked:
            await self._add_like(comment_id, user_id)

        like_count = (
            select(func.count())
            .select_from(CommentLikeModel)
            .where(CommentLikeModel.comment_id == comment_id)
            .scalar_subquery()
        )
        await self._session.execute(
            update(CommentModel)
            .where(CommentModel.id == comment_id)
            .values(likes=like_count, updated_at=CommentModel.updated_at)
            .execution_options(synchronize_session=False)
        )

        likes = await self._session.scalar(
            select(CommentModel.likes).where(CommentModel.id == comment_id)
        )
        return int(likes or 0), liked

    async def count_by_resource(self, resource_id: str) -> int:
        """Count live comments of a resource."""
        total = await self._session.scalar(
            select(func.count())
            .select_from(CommentModel)
            .where(
                CommentModel.resource_id == resource_id,
                CommentModel.is_deleted.is_(False),
            )
        )
        return int(total or 0)

    async def liked_by(self, user_id: int, comment_ids: list[int]) -> set[int]:
        """Return the ids among comment_ids that user_id likes."""
        if not comment_ids:
            return set()

        result = await self._session.execute(
            select(CommentLikeModel.comment_id).where(
                CommentLikeModel.user_id == user_id,
                CommentLikeModel.comment_id.in_(comment_ids),
            )
        )
        return set(result.scalars().all())

    async def _add_like(self, comment_id: int, user_id: int) -> None:
        """
        Insert a like row.

        Two concurrent first likes by the same user both miss the delete;
        the row that loses the race is dropped instead of failing the
        transaction on the primary key.
        """
        values = {"comment_id": comment_id, "user_id": user_id}
        dialect = self._session.get_bind().dialect.name

        conflict_ignoring_insert = _CONFLICT_IGNORING_INSERTS.get(dialect)
        if conflict_ignoring_insert is not None:
            await self._session.execute(
                conflict_ignoring_insert(CommentLikeModel)
                .values(**values)
                .on_conflict_do_nothing()
            )
            return

        try:
            async with self._session.begin_nested():
                await self._session.execute(insert(CommentLikeModel).values(**values))
        except IntegrityError:
            logger.debug("Like on comment %s already recorded", comment_id)
