"""Structured log output for a finished run."""

from __future__ import annotations

import structlog

from batch_scraper.scraper.models import ScrapeReport

logger = structlog.get_logger(__name__)


def log_report(report: ScrapeReport) -> None:
    """Emit one title record and one links record per page, then a summary."""
    for page in report.pages:
        logger.info("scraper.page.title", url=page.url, title=page.title)
        logger.info("scraper.page.links", url=page.url, links=list(page.links))

    logger.info(
        "scraper.run.completed",
        targets=report.total,
        succeeded=report.succeeded,
        failed=report.failed,
    )
