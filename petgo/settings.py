"""Centralized configuration management for the PetGo core."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load variables from a local .env file before the settings singleton is built so
# every consumer importing :mod:`petgo.settings` observes the same environment.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_SQLITE_DATABASE_URL = "sqlite:///./data/petgo.db"
IN_MEMORY_SQLITE_DATABASE_URL = "sqlite:///:memory:"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Only the handful of knobs the favorites and preferences stores need live
    here. Helper properties normalise values so callers never re-parse raw
    environment strings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description=(
            "SQLAlchemy database URL for the local favorites database. Falls back"
            " to a SQLite file under ./data when unset."
        ),
    )
    use_sqlite: bool = Field(
        default=False,
        alias="USE_SQLITE",
        description="Force the default SQLite file regardless of DATABASE_URL.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )
    favorites_dedupe_on_add: bool = Field(
        default=False,
        alias="FAVORITES_DEDUPE_ON_ADD",
        description=(
            "When enabled, adding a place whose (title, address) pair is already"
            " saved is a no-op instead of inserting a second row."
        ),
    )
    sql_echo: bool = Field(
        default=False,
        alias="SQL_ECHO",
        description="Echo emitted SQL through the sqlalchemy.engine logger.",
    )

    @property
    def resolved_database_url(self) -> str:
        """Return the database URL after applying the SQLite fallbacks."""

        if self.use_sqlite or not self.database_url:
            return DEFAULT_SQLITE_DATABASE_URL

        url = self.database_url.strip()
        if not url:
            return DEFAULT_SQLITE_DATABASE_URL
        return url

    @property
    def database_type(self) -> str:
        """Return the SQLAlchemy dialect name of the resolved URL."""

        return self.resolved_database_url.split(":", 1)[0].split("+", 1)[0]

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset optional configuration."""

        warnings: list[str] = []

        if not self.database_url and not self.use_sqlite:
            warnings.append(
                "DATABASE_URL is not set - favorites will be stored in "
                f"{DEFAULT_SQLITE_DATABASE_URL}"
            )

        if self.log_level_numeric == logging.INFO and (
            self.log_level.upper() != logging.getLevelName(logging.INFO)
        ):
            warnings.append(
                f"LOG_LEVEL '{self.log_level}' is not recognised - falling back to INFO"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SQLITE_DATABASE_URL",
    "IN_MEMORY_SQLITE_DATABASE_URL",
    "LOG_FORMAT",
    "get_settings",
]
