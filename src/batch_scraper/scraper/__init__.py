"""Concurrent fetch-parse-aggregate pipeline.

Reads a fixed list of target URLs, fetches each one in its own asyncio
task, extracts the page title and outbound links, and reports the
aggregated results once every task has finished.

Sub-modules:
- ``config``          — constants and tuning defaults
- ``models``          — result dataclasses (``ScrapedPage``, ``ScrapeReport``, ...)
- ``targets``         — target-list loading
- ``http_fetcher``    — async httpx-based page fetcher
- ``page_extractor``  — BeautifulSoup-based title and link extraction
- ``aggregator``      — lock-guarded result collection
- ``orchestrator``    — spawns, throttles and joins the per-target units
- ``report``          — structured log output of a finished run
"""
