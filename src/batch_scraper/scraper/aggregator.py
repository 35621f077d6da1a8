"""Concurrency-safe collection of scraped pages."""

from __future__ import annotations

import threading

from batch_scraper.core.exceptions import AggregatorClosedError
from batch_scraper.scraper.models import ScrapedPage


class ResultAggregator:
    """Append-only page collection shared by every unit of a run.

    ``append`` is serialised by an internal lock that is held only for the
    list append itself, never across an ``await``.  ``drain`` closes the
    collection and hands its contents to the caller; any later ``append``
    raises :class:`AggregatorClosedError`.
    """

    def __init__(self) -> None:
        self._pages: list[ScrapedPage] = []
        self._lock = threading.Lock()
        self._closed = False

    def append(self, page: ScrapedPage) -> None:
        with self._lock:
            if self._closed:
                raise AggregatorClosedError(
                    f"cannot append {page.url!r}: aggregator already drained"
                )
            self._pages.append(page)

    def drain(self) -> list[ScrapedPage]:
        """Close the aggregator and return every appended page.

        Order follows append (completion) order.  Calling ``drain`` again
        returns an empty list.
        """
        with self._lock:
            self._closed = True
            pages, self._pages = self._pages, []
        return pages

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)
