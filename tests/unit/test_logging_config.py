"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from batch_scraper.core.logging_config import configure_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_json_output_with_bound_target(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO")
        structlog.contextvars.bind_contextvars(target_url="https://example.com/")

        logging.getLogger("batch_scraper.test").error("scraper: boom")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "scraper: boom"
        assert record["level"] == "error"
        assert record["logger"] == "batch_scraper.test"
        assert record["target_url"] == "https://example.com/"
        assert "timestamp" in record

    def test_level_and_noisy_loggers(self) -> None:
        configure_logging("warning")

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_debug_keeps_httpx_verbose(self) -> None:
        configure_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.NOTSET

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")

        assert len(logging.getLogger().handlers) == 1
