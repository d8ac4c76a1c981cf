"""Unit tests for the User and Comment domain entities.

Tests construction-time validation and the small amount of behaviour the
entities carry.
"""

from datetime import datetime, timezone

import pytest

from app.domain.entities.comment import Comment
from app.domain.entities.identity import Identity
from app.domain.entities.user import User, normalize_username
from app.domain.exceptions import InvalidEntityStateException

pytestmark = pytest.mark.unit


# === USER TESTS ===


def test_create_valid_user():
    """Test creating a user with valid data."""
    # Arrange & Act
    user = User(
        username="alice",
        password_hash="hashed_password",
        id=1,
        created_at=datetime.now(timezone.utc),
    )

    # Assert
    assert user.username == "alice"
    assert user.password_hash == "hashed_password"
    assert user.id == 1


@pytest.mark.parametrize("username", ["", "   "])
def test_create_user_with_empty_username_fails(username):
    with pytest.raises(InvalidEntityStateException, match="Username cannot be empty"):
        User(username=username, password_hash="hashed_password")


def test_create_user_without_password_hash_fails():
    with pytest.raises(InvalidEntityStateException, match="Password hash is required"):
        User(username="alice", password_hash="")


def test_user_repr_hides_password_hash():
    """Test the hash never shows up in a repr (and therefore in logs)."""
    user = User(username="alice", password_hash="$argon2id$secret-material", id=3)

    assert "argon2id" not in repr(user)
    assert "alice" in repr(user)


@pytest.mark.parametrize(
    "raw,expected",
    [("alice", "alice"), ("  Alice ", "alice"), ("BOB", "bob"), ("   ", "")],
)
def test_normalize_username(raw, expected):
    assert normalize_username(raw) == expected


# === COMMENT TESTS ===


def _comment(**overrides) -> Comment:
    values = {
        "resource_id": "r1",
        "owner_id": 1,
        "owner_username": "alice",
        "body": "hello",
    }
    values.update(overrides)
    return Comment(**values)


def test_create_valid_comment():
    # Act
    comment = _comment(body="  hello world  ")

    # Assert
    assert comment.body == "hello world"
    assert comment.likes == 0
    assert comment.is_deleted is False
    assert comment.parent_id is None


@pytest.mark.parametrize("body", ["", "   ", None])
def test_create_comment_with_empty_body_fails(body):
    with pytest.raises(InvalidEntityStateException, match="body cannot be empty"):
        _comment(body=body)


def test_create_comment_without_resource_fails():
    with pytest.raises(InvalidEntityStateException, match="Resource ID cannot be empty"):
        _comment(resource_id=" ")


def test_is_owned_by():
    """Test ownership is decided by user id alone."""
    comment = _comment(owner_id=1)

    assert comment.is_owned_by(Identity(user_id=1, username="alice"))
    assert not comment.is_owned_by(Identity(user_id=2, username="alice"))
