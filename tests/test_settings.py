"""Typed smoke tests for the process settings loader.

These tests verify three guarantees:
1) `load_settings()` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from blockstyle.core.settings import (
    Settings,
    get_logger,
    load_settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild the cached settings after each test so env changes do not leak."""
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`load_settings()` should return the typed `Settings` model."""
    assert isinstance(load_settings(), Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any, tmp_path: Path) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("BLOCKSTYLE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BLOCKSTYLE_CONFIG", str(tmp_path / "options.json"))

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test"
    assert s.log_level == "DEBUG"
    assert s.config_path == tmp_path / "options.json"
    assert not s.is_dev


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`.

    A unique logger name avoids side effects between tests.
    """
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("blockstyle.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
    assert logger.propagate is False
