"""
Configuration management for gpkg-sqlkit.

This module provides environment-based configuration using Pydantic
BaseSettings. Values come from environment variables (``GPKG_`` prefix or
the unprefixed aliases below) and an optional ``.env`` file.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

import structlog
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("GPKG_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Unprefixed fields:
    - ENVIRONMENT: Deployment environment (dev, staging, prod)
    - LOG_LEVEL: Logging level (uppercase)
    - DATABASE_URL: SQLAlchemy URL of the SQLite database (default in-memory)

    Prefixed fields (GPKG_*):
    - GPKG_SQL_ECHO: Let SQLAlchemy echo every statement
    - GPKG_DEBUG_VERBOSE: Log every statement at DEBUG before running it
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    DATABASE_URL: str = Field(
        default="sqlite://",
        validation_alias=AliasChoices("DATABASE_URL", "GPKG_DATABASE_URL"),
        description="SQLAlchemy database URL",
    )

    sql_echo: bool = Field(
        default=False, description="Pass echo=True to the SQLAlchemy engine"
    )
    debug_verbose: bool = Field(
        default=False, description="Trace each statement at DEBUG level"
    )

    def get_database_connection_string(self) -> str:
        """Return the SQLAlchemy URL, accepting bare ``.gpkg`` file paths."""
        url = self.DATABASE_URL
        if "://" not in url:
            # Plain filesystem path to a GeoPackage / SQLite file
            return f"sqlite:///{url}"
        return url

    @model_validator(mode="after")
    def validate_sqlite_database_url(self) -> "Settings":
        """Only SQLite URLs are accepted.

        Escaping rules and column affinities implemented by this package are
        SQLite's.

        Raises:
            ValueError: If the database URL does not use a sqlite scheme
        """
        db_url = self.get_database_connection_string()
        if not db_url.startswith("sqlite"):
            db_url_preview = db_url[:20]
            logger.error("configuration.unsupported_database", url_preview=db_url_preview)
            raise ValueError(
                "DATABASE_URL must use a SQLite URL (sqlite://...), "
                f"got: {db_url_preview}..."
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="GPKG_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
