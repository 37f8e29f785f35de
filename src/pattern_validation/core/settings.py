"""Centralized validator configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

List-valued fields (block type lists, draft statuses) are read from env vars
as JSON arrays, e.g. ``PATTERN_ALLOWED_EMPTY_BLOCKS='["core/spacer"]'``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_ALLOWED_EMPTY_BLOCKS: tuple[str, ...] = (
    "core/archives",
    "core/calendar",
    "core/latest-posts",
    "core/separator",
    "core/spacer",
    "core/tag-cloud",
)
DEFAULT_TEXT_REQUIRED_BLOCKS: tuple[str, ...] = ("core/paragraph",)
DEFAULT_DRAFT_STATUSES: tuple[str, ...] = ("draft", "auto-draft")


class Settings(BaseSettings):
    """Typed validator configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `PATTERN_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    allowed_empty_blocks : list[str]
        Dynamic block types accepted without markup or changed attributes;
        maps from `PATTERN_ALLOWED_EMPTY_BLOCKS`.
    text_required_blocks : list[str]
        Block types that are empty unless they carry authored text;
        maps from `PATTERN_TEXT_REQUIRED_BLOCKS`.
    draft_statuses : list[str]
        Post statuses for which title validation is bypassed;
        maps from `PATTERN_DRAFT_STATUSES`.
    """

    environment: EnvName = Field(default="dev", alias="PATTERN_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    allowed_empty_blocks: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_EMPTY_BLOCKS),
        alias="PATTERN_ALLOWED_EMPTY_BLOCKS",
    )
    text_required_blocks: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEXT_REQUIRED_BLOCKS),
        alias="PATTERN_TEXT_REQUIRED_BLOCKS",
    )
    draft_statuses: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DRAFT_STATUSES),
        alias="PATTERN_DRAFT_STATUSES",
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    @property
    def is_prod(self) -> bool:
        """Return True if running in the production environment."""
        return self.environment == "prod"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Kept behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("PATTERN_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "pattern_validation") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
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
