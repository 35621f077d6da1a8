"""Unit tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from batch_scraper.config import Settings, get_settings
from batch_scraper.scraper.config import (
    DEFAULT_LAUNCH_DELAY,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_TIMEOUT,
    USER_AGENT,
)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.targets_file == Path("targets.txt")
        assert settings.request_timeout == DEFAULT_TIMEOUT == 10.0
        assert settings.launch_delay == DEFAULT_LAUNCH_DELAY == 1.0
        assert settings.max_concurrency == DEFAULT_MAX_CONCURRENCY
        assert settings.user_agent == USER_AGENT
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_SCRAPER_LAUNCH_DELAY", "0.25")
        monkeypatch.setenv("BATCH_SCRAPER_MAX_CONCURRENCY", "4")
        monkeypatch.setenv("BATCH_SCRAPER_TARGETS_FILE", "/tmp/urls.txt")

        settings = get_settings()

        assert settings.launch_delay == 0.25
        assert settings.max_concurrency == 4
        assert settings.targets_file == Path("/tmp/urls.txt")

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    @pytest.mark.parametrize(
        "field, value",
        [
            ("request_timeout", 0),
            ("launch_delay", -1),
            ("max_concurrency", 0),
        ],
    )
    def test_invalid_values_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            Settings(**{field: value})
