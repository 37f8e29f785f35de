"""Typed tests for the settings loader.

These tests verify:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache,
   including JSON-encoded list fields.
3) `get_logger()` respects the configured LOG_LEVEL.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest

from pattern_validation.core.settings import (
    DEFAULT_ALLOWED_EMPTY_BLOCKS,
    Settings,
    get_logger,
    load_settings,
    settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fresh_settings() -> Generator[None, None, None]:
    """Rebuild cached settings after each test so env overrides do not leak."""
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_defaults_match_builtin_block_lists(monkeypatch: Any) -> None:
    """Without overrides the allow-list is the built-in dynamic block list."""
    monkeypatch.delenv("PATTERN_ALLOWED_EMPTY_BLOCKS", raising=False)
    load_settings.cache_clear()
    s = load_settings()
    assert s.allowed_empty_blocks == list(DEFAULT_ALLOWED_EMPTY_BLOCKS)
    assert "draft" in s.draft_statuses and "auto-draft" in s.draft_statuses


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("PATTERN_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PATTERN_ALLOWED_EMPTY_BLOCKS", '["core/spacer"]')

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test"
    assert s.is_test
    assert s.log_level == "DEBUG"
    assert s.allowed_empty_blocks == ["core/spacer"]


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("pattern_validation.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
