"""
Configuration helpers for the users backend.

Only ambient knobs live here. The data file location is fixed on purpose and
is not read from the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import logging
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _level(value: str | None, default: str = "WARNING") -> str:
        name = (value or "").strip().upper()
        if name and isinstance(logging.getLevelName(name), int):
            return name
        return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=_level(os.getenv("LOG_LEVEL")),
    )
