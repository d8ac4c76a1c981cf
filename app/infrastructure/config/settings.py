"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.
    ``secret_key`` has no usable default: constructing Settings without it
    fails, which aborts application startup.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.access_token_expire_minutes)
    """

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./comments.db")
    db_echo: bool = Field(default=False)
    store_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Deadline for every store interaction of a single request. "
        "Operations exceeding it fail with STORE_TIMEOUT and are rolled back.",
    )

    # Security
    secret_key: str = Field(default="", validate_default=True)
    algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=24 * 60, gt=0)
    password_min_length: int = Field(default=8, ge=1)

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="Comment Service")
    app_version: str = Field(default="1.0.0")

    # CORS
    cors_origins: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Ensure secret_key is provided and meets requirements."""
        if not v or len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be set in environment and be at least 32 characters long"
            )
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
