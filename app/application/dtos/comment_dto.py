"""Comment DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.comment import Comment


class CreateCommentDTO(BaseModel):
    """
    DTO for creating a comment.

    Emptiness of the body is checked after trimming by the domain entity.
    """

    resource: str = Field(..., min_length=1, max_length=255, description="Resource identifier")
    body: str = Field(..., description="Comment text")
    parent_id: Optional[int] = Field(default=None, description="Comment being replied to")

    model_config = ConfigDict(
        json_schema_extra={"example": {"resource": "r1", "body": "hi"}}
    )


class UpdateCommentDTO(BaseModel):
    """DTO for replacing a comment body."""

    body: str = Field(..., description="New comment text")


class CommentDTO(BaseModel):
    """DTO for returning comment data to presentation layer."""

    id: int
    resource: str
    owner_id: int
    owner_username: str
    body: str
    parent_id: Optional[int] = None
    likes: int
    liked: bool = Field(default=False, description="Whether the caller likes this comment")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment, liked: bool = False) -> "CommentDTO":
        """Convert a persisted comment entity to DTO.

        ``liked`` is relative to the caller; anonymous readers always get False.
        """
        if comment.id is None or comment.created_at is None:
            raise ValueError("Cannot create CommentDTO from non-persisted entity")

        return cls(
            id=comment.id,
            resource=comment.resource_id,
            owner_id=comment.owner_id,
            owner_username=comment.owner_username,
            body=comment.body,
            parent_id=comment.parent_id,
            likes=comment.likes,
            liked=liked,
            created_at=comment.created_at,
            updated_at=comment.updated_at or comment.created_at,
        )


class LikeDTO(BaseModel):
    """Result of toggling a like."""

    comment_id: int
    likes: int
    liked: bool
