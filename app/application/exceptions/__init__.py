"""Application layer exceptions."""

from app.application.exceptions.exceptions import (
    ApplicationError,
    CommentNotFoundError,
    ForbiddenError,
    InvalidCredentialsError,
    StoreTimeoutError,
    UnauthorizedError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ValidationError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "UnauthorizedError",
    "ForbiddenError",
    "CommentNotFoundError",
    "StoreTimeoutError",
]
