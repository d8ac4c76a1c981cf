"""Authenticated identity resolved from a session token."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The user a validated request acts on behalf of."""

    user_id: int
    username: str
