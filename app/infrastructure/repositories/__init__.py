"""Repository implementations using SQLAlchemy."""

from app.infrastructure.repositories.comment_repository_impl import CommentRepository
from app.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from app.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["CommentRepository", "UserRepository", "UnitOfWork"]
