"""Exception handlers for converting exceptions to HTTP responses.

Two base handlers cover every ApplicationError and DomainException subclass;
the HTTP status comes from the exception's error_code via
ERROR_CODE_TO_HTTP_STATUS. To add a new exception:
1. Create the exception class with its own error_code
2. Add the error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.application.exceptions import ApplicationError
from app.domain.exceptions import DomainException
from app.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(message: str, error_code: str) -> JSONResponse:
    http_status = get_http_status_for_error_code(error_code)
    headers = None
    if http_status == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=http_status,
        content={"detail": message, "error_code": error_code},
        headers=headers,
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle ALL application layer exceptions."""
    return _error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    Server-side failures (5xx) are logged and returned with their generic
    message only.
    """
    if get_http_status_for_error_code(exc.error_code) >= 500:
        logger.error(
            "Domain failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.error_code,
        )
    return _error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Malformed or missing input is a VALIDATION_ERROR (400) like any other
    policy failure. Submitted values are not echoed back.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors raised outside a unit of work.

    Returns a standardized error response without exposing internal
    database details.
    """
    logger.error("Database error: %s", exc.__class__.__name__, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for any unexpected errors."""
    logger.error("Unhandled error: %s", exc.__class__.__name__, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
