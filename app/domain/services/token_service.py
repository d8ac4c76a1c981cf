"""Token service interface - domain layer abstraction.

The domain cares that:
1. Users receive a signed, time-bounded token on login
2. Tokens can be validated to identify users without a store lookup
3. Tampering and staleness are reported as different failures

The domain does NOT care which token format or library is used.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta

from app.domain.entities.identity import Identity


class TokenData:
    """
    Domain representation of decoded token data.

    This is a pure domain object with no framework dependencies.
    """

    def __init__(
        self,
        user_id: int,
        username: str,
        issued_at: datetime,
        expires_at: datetime,
    ):
        self.user_id = user_id
        self.username = username
        self.issued_at = issued_at
        self.expires_at = expires_at

    @property
    def is_expired(self) -> bool:
        """Check if token is expired."""
        return datetime.now(UTC) >= self.expires_at

    def to_identity(self) -> Identity:
        return Identity(user_id=self.user_id, username=self.username)


class ITokenService(ABC):
    """
    Interface for token generation and validation.

    Implementations are constructed once with the process-wide signing
    secret and are read-only afterwards.
    """

    @abstractmethod
    def generate_access_token(
        self,
        user_id: int,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Generate an access token for a user.

        Args:
            user_id: User's unique identifier
            username: User's unique key
            expires_delta: Token lifetime; the service default when None

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify_token(self, token: str) -> TokenData:
        """
        Verify and decode a token.

        Args:
            token: Encoded token string to verify

        Returns:
            TokenData of a valid, unexpired token

        Raises:
            InvalidTokenException: Bad signature, unparseable structure, wrong
                token type or missing claims
            ExpiredTokenException: Signature is valid but the token is expired
        """
        pass
