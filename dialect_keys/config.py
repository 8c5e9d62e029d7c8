"""Configuration management for dialect-keys."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.dialect-keys/.env
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".dialect-keys" / ".env"
    if user_env.exists():
        return str(user_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Only the command-line surface reads these; the dialect registry and
    descriptors take everything they need as arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIALECT_KEYS_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_dialect: str = Field(
        default="postgres",
        description="Dialect used when a command is given none"
    )
    default_schema: str = Field(
        default="public",
        description="Schema name passed to query builders when --schema is omitted"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR)"
    )


# Global settings instance
settings = Settings()
