"""Unit tests for application DTOs.

Tests Pydantic validation at the API boundary, before requests reach the
services.
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from app.application.dtos.auth_dto import LoginDTO, RegisterDTO
from app.application.dtos.comment_dto import CommentDTO, CreateCommentDTO
from app.application.dtos.user_dto import UserDTO
from app.domain.entities.comment import Comment
from app.domain.entities.user import User

pytestmark = pytest.mark.unit


# === CREDENTIALS DTO TESTS ===


def test_register_dto_valid():
    dto = RegisterDTO(username="alice", password="secret123")

    assert dto.username == "alice"
    assert dto.password == "secret123"


def test_credentials_accept_unique_key_and_secret_aliases():
    """Test the alternative field names map onto username/password."""
    dto = LoginDTO.model_validate({"uniqueKey": "alice", "secret": "secret123"})

    assert dto.username == "alice"
    assert dto.password == "secret123"


def test_credentials_repr_hides_password():
    dto = RegisterDTO(username="alice", password="topsecret99")

    assert "topsecret99" not in repr(dto)


@pytest.mark.parametrize(
    "payload",
    [{"username": "alice"}, {"password": "secret123"}, {}],
)
def test_credentials_missing_field_raises_error(payload):
    with pytest.raises(ValidationError):
        LoginDTO.model_validate(payload)


# === COMMENT DTO TESTS ===


def test_create_comment_dto_empty_resource_raises_error():
    with pytest.raises(ValidationError) as exc_info:
        CreateCommentDTO(resource="", body="hi")

    assert "resource" in str(exc_info.value)


def test_create_comment_dto_parent_is_optional():
    dto = CreateCommentDTO(resource="r1", body="hi")

    assert dto.parent_id is None


def test_comment_dto_from_entity():
    """Test conversion exposes the resource and ownership fields."""
    # Arrange
    now = datetime.now(UTC)
    comment = Comment(
        resource_id="r1",
        owner_id=1,
        owner_username="alice",
        body="hi",
        id=5,
        created_at=now,
    )

    # Act
    dto = CommentDTO.from_entity(comment)

    # Assert
    assert dto.resource == "r1"
    assert dto.owner_id == 1
    assert dto.updated_at == now


def test_comment_dto_from_unsaved_entity_raises_error():
    comment = Comment(resource_id="r1", owner_id=1, owner_username="alice", body="hi")

    with pytest.raises(ValueError, match="non-persisted"):
        CommentDTO.from_entity(comment)


# === USER DTO TESTS ===


def test_user_dto_has_no_password_hash():
    user = User(id=1, username="alice", password_hash="HASHED:x", created_at=datetime.now(UTC))

    dto = UserDTO.from_entity(user)

    assert "password_hash" not in dto.model_dump()
    assert dto.username == "alice"


def test_user_dto_from_unsaved_entity_raises_error():
    with pytest.raises(ValueError, match="non-persisted"):
        UserDTO.from_entity(User(username="alice", password_hash="HASHED:x"))
