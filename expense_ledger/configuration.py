"""Mini README: Centralised configuration model for the expense ledger.

Structure:
    * LedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to find the database file and the log level.
    Values come from ``EXPENSES_*`` environment variables or a ``.env`` file
    in the working directory. The configuration is cached so validation runs
    only once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerSettings(BaseSettings):
    """Runtime configuration for the expense ledger."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    database_path: Path = Field(
        Path("expenses.db"),
        description="SQLite file holding the expenses table.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; log output is written to stderr.",
    )

    class Config:
        env_prefix = "EXPENSES_"
        env_file = ".env"
        case_sensitive = False

    @validator("database_path", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories and make sure the parent folder exists."""

        path = Path(value).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @validator("log_level")
    def _known_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
