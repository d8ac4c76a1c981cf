"""User DTOs for application layer using Pydantic."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.entities.user import User


class UserDTO(BaseModel):
    """Public view of a user. The password hash is never part of it."""

    id: int
    username: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        Raises:
            ValueError: If the entity is not persisted (missing id or created_at)
        """
        if user.id is None or user.created_at is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls(id=user.id, username=user.username, created_at=user.created_at)
