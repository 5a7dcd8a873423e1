"""Centralized process configuration using Pydantic Settings (v2).

This module exposes a cached `Settings` loader, `load_settings()`, that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod

Rule options (which policies are switched on) live in
:mod:`blockstyle.core.contracts.options`; this module only carries the
process-level knobs: environment label, log level and the default options
file consulted by the CLI and the API when the caller passes none.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed process configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `BLOCKSTYLE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    config_path : Optional[Path]
        Default JSON options file; maps from `BLOCKSTYLE_CONFIG`.
    """

    environment: EnvName = Field(default="dev", alias="BLOCKSTYLE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    config_path: Path | None = Field(default=None, alias="BLOCKSTYLE_CONFIG")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("BLOCKSTYLE_ENV", "dev")
    return Settings()


def get_logger(name: str = "blockstyle") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
