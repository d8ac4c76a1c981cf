"""JWT token service implementation using PyJWT.

This is an INFRASTRUCTURE detail. The domain layer (ITokenService interface)
defines WHAT we need (token generation/validation), while this implementation
defines HOW we do it (using JWT via PyJWT library).

Dependency flow:
    AuthService (application) → ITokenService (domain) ← JWTTokenService (infrastructure)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from app.domain.exceptions import ExpiredTokenException, InvalidTokenException
from app.domain.services.token_service import ITokenService, TokenData

ACCESS_TOKEN_TYPE = "access"
REQUIRED_CLAIMS = ["sub", "username", "exp", "iat", "type"]


class JWTTokenService(ITokenService):
    """
    Production token service using JWT (JSON Web Tokens) via PyJWT.

    JWT Structure:
    - Header: Algorithm and token type (e.g., {"alg": "HS256", "typ": "JWT"})
    - Payload: Claims (sub, username, iat, exp, type)
    - Signature: HMAC signature using the signing secret

    The service is built once at startup from Settings and holds no mutable
    state, so a single instance is shared by every request.

    Security Considerations:
    - Uses HS256 (HMAC with SHA-256) for signing by default
    - Secret key must be at least 32 characters
    - A token is valid only while now < exp; there is no revocation list
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 24 * 60,
    ):
        """
        Initialize JWT token service.

        Args:
            secret_key: Secret key for signing tokens (min 32 characters)
            algorithm: JWT signing algorithm (default: HS256)
            access_token_expire_minutes: Default token lifetime in minutes

        Raises:
            ValueError: If secret_key is too short
        """
        if len(secret_key) < 32:
            raise ValueError("Secret key must be at least 32 characters long")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._default_ttl = timedelta(minutes=access_token_expire_minutes)

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    def generate_access_token(
        self,
        user_id: int,
        username: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Generate a JWT access token.

        The token payload contains:
        - sub (subject): User ID
        - username: User's unique key
        - iat (issued at): When token was created
        - exp (expiration): iat + expires_delta
        - type: "access"

        Args:
            user_id: User's unique identifier
            username: User's unique key
            expires_delta: Token lifetime (defaults to the configured TTL)

        Returns:
            Encoded JWT string

        Example:
            >>> service = JWTTokenService(secret_key="x" * 32)
            >>> token = service.generate_access_token(123, "alice")
            >>> print(token)
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJzdWIiOiIxMjMi..."
        """
        now = datetime.now(timezone.utc)
        ttl = self._default_ttl if expires_delta is None else expires_delta

        payload = {
            "sub": str(user_id),
            "username": username,
            "iat": now,
            "exp": now + ttl,
            "type": ACCESS_TOKEN_TYPE,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenData:
        """
        Verify and decode a JWT access token.

        This method:
        1. Verifies the signature using the secret key
        2. Checks that the token has not expired
        3. Validates required claims and the token type
        4. Extracts user information

        Expiry is reported separately from every other failure so callers can
        tell staleness from tampering.

        Args:
            token: Encoded JWT string

        Returns:
            TokenData of the valid token

        Raises:
            ExpiredTokenException: If the token is correctly signed but expired
            InvalidTokenException: If the token is malformed, tampered with,
                of the wrong type, or missing claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError as exc:
            raise ExpiredTokenException() from exc
        except InvalidTokenError as exc:
            raise InvalidTokenException() from exc

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidTokenException("Invalid token type")

        try:
            user_id = int(payload["sub"])
            username = str(payload["username"])
            iat = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (TypeError, ValueError, KeyError) as exc:
            raise InvalidTokenException("Invalid token claims") from exc

        return TokenData(
            user_id=user_id,
            username=username,
            issued_at=iat,
            expires_at=exp,
        )
