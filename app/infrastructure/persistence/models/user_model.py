"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.entities.user import User
from app.infrastructure.persistence.database import Base


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    The unique index on username is what makes registration atomic.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(150),
        unique=True,
        index=True,
        nullable=False,
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, username={self.username!r})"

    def to_entity(self) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=self.id,
            username=self.username,
            password_hash=self.password_hash,
            created_at=self.created_at,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """Create ORM model from domain entity."""
        model = UserModel(
            username=user.username,
            password_hash=user.password_hash,
        )

        if user.id is not None:
            model.id = user.id
        if user.created_at is not None:
            model.created_at = user.created_at

        return model
