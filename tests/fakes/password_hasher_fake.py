"""Fake password hasher for testing.

Real Argon2 hashing is slow on purpose (tens of milliseconds per call),
which adds nothing to tests of registration or login rules. The fake
"hashes" by prefixing, so tests run in microseconds and can see what was
hashed. Only test_password_hasher.py exercises the real Argon2PasswordHasher.
"""

from app.domain.exceptions import MalformedHashException
from app.domain.services.password_hasher import IPasswordHasher


class FakePasswordHasher(IPasswordHasher):
    """
    Fake password hasher for unit testing.

    Usage in tests:
        hasher = FakePasswordHasher()
        hashed = hasher.hash("password123")      # "HASHED:password123"
        hasher.verify("password123", hashed)     # True
        hasher.verify("wrong", hashed)           # False
        hasher.verify("x", "$argon2id$...")      # raises MalformedHashException

    Security Note:
        NEVER use this in production! It is string concatenation.
    """

    HASH_PREFIX = "HASHED:"

    def __init__(self):
        self.verify_calls = 0

    def hash(self, plain_password: str) -> str:
        """ "Hash" a password by prefixing it."""
        return f"{self.HASH_PREFIX}{plain_password}"

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Compare against the fake hash; foreign formats are malformed."""
        self.verify_calls += 1

        if not self.is_fake_hash(hashed_password):
            raise MalformedHashException()

        return plain_password == hashed_password[len(self.HASH_PREFIX) :]

    # Helper methods for testing

    def is_fake_hash(self, hashed_password: str) -> bool:
        """Check if a hash was created by this fake hasher."""
        return hashed_password.startswith(self.HASH_PREFIX)
