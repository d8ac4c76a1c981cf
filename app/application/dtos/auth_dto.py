"""Authentication DTOs for the application layer."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CredentialsDTO(BaseModel):
    """
    Username/password pair used by both register and login.

    Length and emptiness policies are enforced by AuthService, not here, so
    the password floor stays configurable.
    """

    username: str = Field(
        ...,
        validation_alias=AliasChoices("username", "uniqueKey"),
        description="Unique user key",
    )
    password: str = Field(
        ...,
        validation_alias=AliasChoices("password", "secret"),
        repr=False,
        description="User's password",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [{"username": "alice", "password": "secret123"}]
        },
    )


class RegisterDTO(CredentialsDTO):
    """DTO for user registration request."""


class LoginDTO(CredentialsDTO):
    """DTO for user login request."""


class TokenDTO(BaseModel):
    """DTO for token response."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "token_type": "bearer",
                    "expires_in": 86400,
                }
            ]
        }
    }
