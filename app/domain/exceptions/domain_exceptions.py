"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - Business rule violations
        - Malformed credentials or tokens
        - Storage failures surfaced through repository contracts
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class MalformedHashException(DomainException):
    """Raised when a stored password hash cannot be identified or parsed."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message, error_code="MALFORMED_HASH")


class InvalidTokenException(DomainException):
    """Raised when a token's signature or structure is invalid."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, error_code="INVALID_TOKEN")


class ExpiredTokenException(DomainException):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class StorageException(DomainException):
    """Raised when the backing store fails to complete an operation."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message, error_code="STORAGE_ERROR")
