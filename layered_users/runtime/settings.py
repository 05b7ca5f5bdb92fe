"""Environment-based settings configuration.

Only simple environment variables (strings, numbers, booleans) are read
here. A ``.env`` file in the working directory is honoured.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings that come from environment variables."""

    # Environment and deployment
    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)
    log_format: Literal["plain", "json"] = Field(default="plain")
    log_max_size_mb: int = Field(default=10, ge=1)
    log_backup_count: int = Field(default=5, ge=0)

    # Storage; unset means the in-memory repository
    database_url: str | None = Field(default=None)
    database_echo: bool = Field(default=False)

    # HTTP server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @property
    def uses_database(self) -> bool:
        return self.database_url is not None

    def validate_runtime(self) -> None:
        """Validate configuration for the current environment."""
        if self.environment == "production":
            if not self.database_url:
                raise ValueError("DATABASE_URL must be configured in production")
            if self.database_url.startswith("sqlite://"):
                logger.warning("SQLite is not recommended for production")
        elif self.environment == "development":
            if self.database_url is None:
                logger.warning(
                    "DATABASE_URL is not set; users are kept in memory and lost on exit"
                )
            elif self.database_url.startswith("sqlite://"):
                logger.warning("Using SQLite database in development")


def get_settings() -> Settings:
    """Read a fresh Settings instance from the environment."""
    return Settings()
