"""Unit tests for the result aggregator."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from batch_scraper.core.exceptions import AggregatorClosedError
from batch_scraper.scraper.aggregator import ResultAggregator
from batch_scraper.scraper.models import ScrapedPage


def _page(n: int) -> ScrapedPage:
    return ScrapedPage(url=f"https://example.com/{n}", title=f"Page {n}", links=(f"/{n}",))


class TestResultAggregator:
    def test_drain_returns_appended_pages_in_order(self) -> None:
        aggregator = ResultAggregator()
        aggregator.append(_page(1))
        aggregator.append(_page(2))

        assert len(aggregator) == 2
        assert aggregator.drain() == [_page(1), _page(2)]

    def test_drain_closes_aggregator(self) -> None:
        aggregator = ResultAggregator()
        aggregator.drain()

        assert aggregator.closed is True
        with pytest.raises(AggregatorClosedError):
            aggregator.append(_page(1))

    def test_second_drain_is_empty(self) -> None:
        aggregator = ResultAggregator()
        aggregator.append(_page(1))
        aggregator.drain()

        assert aggregator.drain() == []

    def test_concurrent_appends_from_threads_are_not_lost(self) -> None:
        aggregator = ResultAggregator()
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(aggregator.append, (_page(n) for n in range(1000))))

        pages = aggregator.drain()
        assert len(pages) == 1000
        assert {p.url for p in pages} == {f"https://example.com/{n}" for n in range(1000)}


@pytest.mark.asyncio
class TestResultAggregatorAsync:
    async def test_concurrent_appends_from_tasks_are_not_lost(self) -> None:
        aggregator = ResultAggregator()

        async def _produce(n: int) -> None:
            await asyncio.sleep(0)
            aggregator.append(_page(n))

        await asyncio.gather(*(_produce(n) for n in range(200)))

        assert sorted(p.url for p in aggregator.drain()) == sorted(
            f"https://example.com/{n}" for n in range(200)
        )
