"""Fan-out, throttling and join of the per-target units of work.

For every target, in list order, :class:`ScrapeOrchestrator` spawns one
asyncio task that fetches the page, extracts it and appends the result to
a shared :class:`ResultAggregator`.  Launches are spaced by
``Settings.launch_delay``; the number of units inside the fetch+extract
phase is capped separately by an ``asyncio.Semaphore`` of
``Settings.max_concurrency`` permits.

Error isolation:
    Each unit catches every ``Exception`` at its own boundary and returns a
    :class:`ScrapeOutcome`.  The final ``asyncio.gather`` therefore only
    observes completion, and a faulty unit never costs its siblings their
    results.  Each failed unit logs exactly one ERROR record.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import structlog

from batch_scraper.config.settings import Settings, get_settings
from batch_scraper.core.exceptions import FetchError, ProtocolError
from batch_scraper.scraper.aggregator import ResultAggregator
from batch_scraper.scraper.http_fetcher import fetch_url
from batch_scraper.scraper.models import (
    FailureKind,
    ScrapedPage,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeReport,
)
from batch_scraper.scraper.page_extractor import extract_page
from batch_scraper.scraper.report import log_report
from batch_scraper.scraper.targets import load_targets

logger = logging.getLogger(__name__)


class ScrapeOrchestrator:
    """Runs one scraping pass over a fixed target list.

    Args:
        settings: Run configuration.  Defaults to :func:`get_settings`.
        client: Optional pre-built HTTP client.  When omitted, a client is
            created for each run and closed when the run ends.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client

    @property
    def settings(self) -> Settings:
        return self._settings

    async def run(self, targets_path: str | Path | None = None) -> ScrapeReport:
        """Load the target list, scrape every target and report the results.

        Args:
            targets_path: Target file.  Defaults to ``Settings.targets_file``.

        Returns:
            The finished :class:`ScrapeReport`.

        Raises:
            SourceLoadError: If the target file cannot be read.  Nothing is
                fetched in that case.
        """
        targets = load_targets(targets_path or self._settings.targets_file)
        report = await self.run_targets(targets)
        log_report(report)
        return report

    async def run_targets(self, targets: Sequence[str]) -> ScrapeReport:
        """Scrape *targets* concurrently and wait for every unit to finish.

        Args:
            targets: Target URLs in launch order.

        Returns:
            A :class:`ScrapeReport` whose page and failure counts add up to
            ``len(targets)``.
        """
        aggregator = ResultAggregator()
        semaphore = asyncio.Semaphore(self._settings.max_concurrency)
        delay = self._settings.launch_delay

        async with self._http_client() as client:
            tasks: list[asyncio.Task[ScrapeOutcome]] = []
            for index, url in enumerate(targets):
                tasks.append(
                    asyncio.create_task(
                        self._scrape_one(
                            url,
                            client=client,
                            semaphore=semaphore,
                            aggregator=aggregator,
                        ),
                        name=f"scrape-{index}",
                    )
                )
                if delay and index < len(targets) - 1:
                    await asyncio.sleep(delay)

            results = await asyncio.gather(*tasks, return_exceptions=True)

        pages = aggregator.drain()
        failures: list[ScrapeFailure] = []
        for url, result in zip(targets, results):
            if isinstance(result, BaseException):
                # Only reachable for BaseException subclasses such as
                # cancellation; ordinary exceptions stop at the unit.
                failure = ScrapeFailure(url=url, reason=repr(result), kind=FailureKind.INTERNAL)
                logger.error("scraper: unit for '%s' aborted: %r", url, result)
                failures.append(failure)
            elif result.failure is not None:
                failures.append(result.failure)

        return ScrapeReport(pages=pages, failures=failures)

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected client, or build one that lives for this run."""
        if self._client is not None:
            yield self._client
            return

        limits = httpx.Limits(
            max_connections=self._settings.max_concurrency,
            max_keepalive_connections=self._settings.max_concurrency,
        )
        async with httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            follow_redirects=True,
            headers={"User-Agent": self._settings.user_agent},
            limits=limits,
        ) as client:
            yield client

    async def _scrape_one(
        self,
        url: str,
        *,
        client: httpx.AsyncClient,
        semaphore: asyncio.Semaphore,
        aggregator: ResultAggregator,
    ) -> ScrapeOutcome:
        """Fetch, extract and aggregate a single target.

        Never raises ``Exception``: every failure becomes the ``failure``
        field of the returned outcome, logged once at ERROR.
        """
        structlog.contextvars.bind_contextvars(target_url=url)
        try:
            async with semaphore:
                logger.debug("scraper: fetching %s", url)
                result = await fetch_url(url, client=client, timeout=self._settings.request_timeout)
                result.raise_for_error()

                logger.debug("scraper: extracting %s", url)
                page: ScrapedPage = extract_page(url, result.body or b"")

            aggregator.append(page)
        except FetchError as exc:
            kind = FailureKind.PROTOCOL if isinstance(exc, ProtocolError) else FailureKind.TRANSPORT
            logger.error("scraper: error for '%s' (%s): %s", url, kind.value, exc)
            return ScrapeOutcome(url=url, failure=ScrapeFailure(url=url, reason=str(exc), kind=kind))
        except Exception as exc:  # noqa: BLE001
            logger.error("scraper: unexpected error for '%s': %s", url, exc, exc_info=True)
            return ScrapeOutcome(
                url=url,
                failure=ScrapeFailure(url=url, reason=f"{type(exc).__name__}: {exc}", kind=FailureKind.INTERNAL),
            )

        logger.debug("scraper: aggregated %s", url)
        return ScrapeOutcome(url=url, page=page)
