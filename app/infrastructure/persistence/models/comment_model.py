"""Comment ORM models - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.comment import Comment
from app.infrastructure.persistence.database import Base


class CommentModel(Base):
    """SQLAlchemy ORM model for comments table."""

    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_resource_created", "resource_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    resource_id: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), index=True, nullable=False
    )
    owner_username: Mapped[str] = mapped_column(String(150), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    parent_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("comments.id"), nullable=True
    )
    likes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"CommentModel(id={self.id!r}, resource_id={self.resource_id!r}, "
            f"owner_id={self.owner_id!r})"
        )

    def to_entity(self) -> Comment:
        """Convert ORM model to domain entity."""
        return Comment(
            id=self.id,
            resource_id=self.resource_id,
            owner_id=self.owner_id,
            owner_username=self.owner_username,
            body=self.body,
            parent_id=self.parent_id,
            likes=self.likes,
            is_deleted=self.is_deleted,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @staticmethod
    def from_entity(comment: Comment) -> "CommentModel":
        """Create ORM model from domain entity."""
        model = CommentModel(
            resource_id=comment.resource_id,
            owner_id=comment.owner_id,
            owner_username=comment.owner_username,
            body=comment.body,
            parent_id=comment.parent_id,
            likes=comment.likes,
            is_deleted=comment.is_deleted,
        )

        if comment.id is not None:
            model.id = comment.id

        return model


class CommentLikeModel(Base):
    """One row per (comment, user) like."""

    __tablename__ = "comment_likes"

    comment_id: Mapped[int] = mapped_column(
        ForeignKey("comments.id"), primary_key=True
    )
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)
