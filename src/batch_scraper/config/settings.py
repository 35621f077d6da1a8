"""Application settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.
Every tunable of a scraping run is read through this module; the CLI
layers per-run overrides on top and re-validates the result.

Usage::

    from batch_scraper.config.settings import get_settings

    settings = get_settings()
    timeout = settings.request_timeout
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from batch_scraper.scraper.config import (
    DEFAULT_LAUNCH_DELAY,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_TARGETS_FILE,
    DEFAULT_TIMEOUT,
    USER_AGENT,
)


class Settings(BaseSettings):
    """Scraper configuration backed by environment variables and an optional .env file.

    Every field has a default, so a bare environment produces a working
    configuration.  Variables use the ``BATCH_SCRAPER_`` prefix, e.g.
    ``BATCH_SCRAPER_LAUNCH_DELAY=0.5``.
    """

    model_config = SettingsConfigDict(
        env_prefix="BATCH_SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    targets_file: Path = Path(DEFAULT_TARGETS_FILE)
    """Newline-delimited list of URLs to scrape."""

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Timeout in seconds applied to each whole GET request."""

    launch_delay: float = Field(default=DEFAULT_LAUNCH_DELAY, ge=0)
    """Pause in seconds after each unit is spawned, before the next one.

    Gates the launch cadence only; it never waits for a unit to finish.
    """

    max_concurrency: int = Field(default=DEFAULT_MAX_CONCURRENCY, ge=1)
    """Upper bound on units fetching or extracting at the same time."""

    user_agent: str = USER_AGENT
    """User-agent string sent with every HTTP request."""

    # ------------------------------------------------------------------
    # Application behaviour
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL."""


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    Uses ``functools.lru_cache`` so that Pydantic Settings reads the environment
    and .env file exactly once per process lifetime.  In tests, call
    ``get_settings.cache_clear()`` after patching environment variables.

    Returns:
        Settings: The validated settings object.
    """
    return Settings()
