"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when request input is missing or fails a policy check."""

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message, error_code="VALIDATION_ERROR")


class UserNotFoundError(ApplicationError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")


class UserAlreadyExistsError(ApplicationError):
    """Raised when attempting to register a username that is taken."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message, error_code="USER_ALREADY_EXISTS")


class InvalidCredentialsError(ApplicationError):
    """Raised when login credentials are invalid.

    The same message is used whether the username is unknown or the
    password is wrong.
    """

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class UnauthorizedError(ApplicationError):
    """Raised when a request carries no valid token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, error_code="UNAUTHORIZED")


class ForbiddenError(ApplicationError):
    """Raised when an authenticated user may not act on a resource."""

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message, error_code="FORBIDDEN")


class CommentNotFoundError(ApplicationError):
    """Raised when a comment does not exist or was deleted."""

    def __init__(self, message: str = "Comment not found"):
        super().__init__(message, error_code="COMMENT_NOT_FOUND")


class StoreTimeoutError(ApplicationError):
    """Raised when the store does not answer within the request deadline."""

    def __init__(self, message: str = "The data store did not respond in time"):
        super().__init__(message, error_code="STORE_TIMEOUT")
