"""Command-line entry point.

Usage::

    # Scrape the URLs listed in ./targets.txt
    batch-scraper

    # Another list, faster launches, at most 4 requests in flight
    batch-scraper urls.txt --delay 0.2 --max-concurrency 4

Exit codes: 0 when the run completes (whatever the per-target outcomes),
1 when the target file cannot be read, 130 when interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from batch_scraper.config.settings import Settings, get_settings
from batch_scraper.core.exceptions import SourceLoadError
from batch_scraper.core.logging_config import configure_logging
from batch_scraper.scraper.orchestrator import ScrapeOrchestrator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="batch-scraper",
        description="Fetch a list of pages concurrently and log each page's title and links.",
    )
    p.add_argument(
        "targets_file",
        nargs="?",
        default=None,
        help="Text file with one URL per line (default: settings.targets_file, i.e. targets.txt)",
    )
    p.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    p.add_argument("--delay", type=float, default=None, help="Delay (seconds) between unit launches")
    p.add_argument(
        "--max-concurrency",
        type=int,
        default=None,
        help="Maximum number of pages fetched at the same time",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return p


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {}
    if args.targets_file is not None:
        overrides["targets_file"] = args.targets_file
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.delay is not None:
        overrides["launch_delay"] = args.delay
    if args.max_concurrency is not None:
        overrides["max_concurrency"] = args.max_concurrency
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    # model_copy(update=...) does not validate; rebuild from the merged dict.
    return Settings.model_validate(settings.model_dump() | overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _apply_overrides(get_settings(), args)
    except ValidationError as exc:
        parser.error(str(exc))
    configure_logging(settings.log_level)

    orchestrator = ScrapeOrchestrator(settings)
    try:
        asyncio.run(orchestrator.run())
    except SourceLoadError as exc:
        logger.error("scraper: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("scraper: stopped by user")
        return 130

    return 0
