"""Comment domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.entities.identity import Identity
from app.domain.exceptions import InvalidEntityStateException


@dataclass
class Comment:
    """
    A message attached to a resource and owned by exactly one user.

    owner_id and owner_username are fixed at creation. Only the body,
    likes and is_deleted change afterwards, through the repository.
    """

    resource_id: str
    owner_id: int
    owner_username: str
    body: str
    parent_id: Optional[int] = None
    likes: int = 0
    is_deleted: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.resource_id or len(self.resource_id.strip()) == 0:
            raise InvalidEntityStateException(
                "Resource ID cannot be empty. A comment must belong to a resource."
            )

        body = (self.body or "").strip()
        if not body:
            raise InvalidEntityStateException("Comment body cannot be empty.")
        self.body = body

    def is_owned_by(self, identity: Identity) -> bool:
        """Check whether the identity is this comment's owner."""
        return self.owner_id == identity.user_id

