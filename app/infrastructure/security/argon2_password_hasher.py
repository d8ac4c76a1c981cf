"""Argon2 password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (using Argon2 via pwdlib).

Dependency flow:
    AuthService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib is only imported here, so unit tests can run AuthService with a
FakePasswordHasher and no real crypto.
"""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from app.domain.exceptions import MalformedHashException
from app.domain.services.password_hasher import IPasswordHasher


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using Argon2id algorithm via pwdlib.

    Argon2id is recommended by OWASP for password storage and is
    deliberately slow. pwdlib's secure defaults are used:
    - Memory cost: 65536 KB (64 MB)
    - Time cost: 3 iterations
    - Parallelism: 4 lanes

    Usage:
        hasher = Argon2PasswordHasher()
        hashed = hasher.hash("user_password_123")
        # "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"

        hasher.verify("user_password_123", hashed)  # True
        hasher.verify("wrong_password", hashed)     # False
        hasher.verify("anything", "not-a-hash")     # raises MalformedHashException
    """

    def __init__(self):
        self._password_hash = PasswordHash((Argon2Hasher(),))

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        Each call generates a unique salt, so hashing the same password
        twice produces different hashes.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Argon2 hash string (self-contained, includes salt and parameters)
        """
        return self._password_hash.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against an Argon2 hash.

        The salt and parameters are read from the hash and the comparison
        is constant-time.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The Argon2 hash to check against

        Returns:
            True if the password matches, False otherwise

        Raises:
            MalformedHashException: If the hash is not a recognizable Argon2 hash
        """
        try:
            return self._password_hash.verify(plain_password, hashed_password)
        except UnknownHashError:
            # UnknownHashError carries the hash itself; keep it out of tracebacks
            raise MalformedHashException() from None
