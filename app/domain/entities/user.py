"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.exceptions import InvalidEntityStateException


def normalize_username(username: str) -> str:
    """Canonical form of a username used as the unique credential key."""
    return username.strip().lower()


@dataclass
class User:
    """
    User domain entity representing a registered identity.

    The username is the unique, immutable credential key. The password hash
    is opaque and must never leave the service boundary; ``__repr__`` hides it
    so it cannot end up in logs by accident.
    """

    username: str
    password_hash: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        These are structural validations - they ensure the entity can exist
        in a valid state. Violations indicate the entity cannot be created.
        """
        if not self.username or len(self.username.strip()) == 0:
            raise InvalidEntityStateException(
                "Username cannot be empty. User must have a unique key."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
