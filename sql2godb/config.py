"""Configuration management for sql2godb."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.sql2godb/.env
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".sql2godb" / ".env"
    if user_env.exists():
        return str(user_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from SQL2GODB_* environment variables."""

    # Generated code
    query_timeout_seconds: int = Field(
        default=3,
        ge=1,
        description="Timeout applied to every generated database call"
    )
    db_handle_type: str = Field(
        default="DB",
        description="Go type name of the database handle parameter"
    )
    package_name: Optional[str] = Field(
        default=None,
        description="Go package clause written before the generated code"
    )
    strict_identifier: bool = Field(
        default=False,
        description="Reject tables without an 'id' column"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics written to stderr"
    )

    class Config:
        env_prefix = "SQL2GODB_"
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
