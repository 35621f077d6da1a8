"""Shared pytest fixtures for batch scraper tests.

Fixture summary
---------------
settings        — Settings with no launch delay and a short timeout.
targets_file    — Factory writing a target list into ``tmp_path``.

All HTTP traffic is mocked with ``respx``; no test touches the network.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from batch_scraper.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer ``BATCH_SCRAPER_*`` variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("BATCH_SCRAPER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(launch_delay=0.0, request_timeout=5.0, max_concurrency=10)


@pytest.fixture
def targets_file(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        path = tmp_path / "targets.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
