"""Domain exceptions - business rule violations."""

from app.domain.exceptions.domain_exceptions import (
    DomainException,
    ExpiredTokenException,
    InvalidEntityStateException,
    InvalidTokenException,
    MalformedHashException,
    StorageException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "MalformedHashException",
    "InvalidTokenException",
    "ExpiredTokenException",
    "StorageException",
]
