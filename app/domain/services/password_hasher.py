"""Password hashing interface - domain service abstraction.

Password hashing is a business requirement, not an infrastructure detail:
secrets must be hashed before storage and verifiable during login. Which
algorithm or library does the work is left to the infrastructure layer.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations must be cryptographically secure, generate a unique salt
    per hash, and embed their parameters in the returned string so that
    ``verify`` needs nothing but the hash itself.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Self-describing hash string (algorithm, parameters, salt, digest)
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise

        Raises:
            MalformedHashException: If hashed_password is not a recognizable hash
        """
        pass
