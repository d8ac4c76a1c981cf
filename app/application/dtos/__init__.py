"""Data Transfer Objects for application layer."""

from app.application.dtos.auth_dto import LoginDTO, RegisterDTO, TokenDTO
from app.application.dtos.comment_dto import (
    CommentDTO,
    CreateCommentDTO,
    LikeDTO,
    UpdateCommentDTO,
)
from app.application.dtos.user_dto import UserDTO

__all__ = [
    "RegisterDTO",
    "LoginDTO",
    "TokenDTO",
    "UserDTO",
    "CreateCommentDTO",
    "UpdateCommentDTO",
    "CommentDTO",
    "LikeDTO",
]
