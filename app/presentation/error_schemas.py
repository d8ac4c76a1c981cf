"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-validation error response."""

    detail: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Comment not found"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error kind for client-side handling",
        examples=["COMMENT_NOT_FOUND", "FORBIDDEN", "UNAUTHORIZED"],
    )


class ValidationErrorDetail(BaseModel):
    """A single field that failed request validation."""

    field: str = Field(
        ...,
        description="Location of the invalid field (e.g., 'body.username', 'query.resource')",
        examples=["body.username", "body.body", "query.resource"],
    )
    message: str = Field(
        ...,
        description="What is wrong with the field",
        examples=["Field required", "Input should be a valid integer"],
    )


class ValidationErrorResponse(ErrorResponse):
    """Body of a 400 response produced by validation_error_handler."""

    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="All validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "body.username", "message": "Field required"},
                    {"field": "query.resource", "message": "Field required"},
                ],
            }
        }
    }


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """OpenAPI ``responses`` entries documenting ErrorResponse bodies."""
    return {code: {"model": ErrorResponse} for code in status_codes}
