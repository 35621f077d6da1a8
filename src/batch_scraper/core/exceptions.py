"""Application-wide exception hierarchy for the batch scraper.

All custom exceptions subclass ``BatchScraperError``, enabling consistent
error handling at the CLI boundary.

Hierarchy::

    BatchScraperError
    ├── SourceLoadError          (path)
    ├── FetchError               (url)
    │   ├── TransportError
    │   └── ProtocolError        (status_code)
    └── AggregatorClosedError

Only ``SourceLoadError`` is meant to escape a run.  Fetch failures are
classified per target and reported as values, never propagated.
"""

from __future__ import annotations

from pathlib import Path


class BatchScraperError(Exception):
    """Base class for all batch scraper exceptions."""


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class SourceLoadError(BatchScraperError):
    """Raised when the target list cannot be read.

    Args:
        path: Path of the target file.
        reason: Human-readable description of the failure.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot read target list '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


class FetchError(BatchScraperError):
    """Base class for per-target fetch failures.

    Args:
        message: Human-readable description of the failure.
        url: The target URL that failed.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Network-level failure: timeout, DNS, connection reset, bad URL."""


class ProtocolError(FetchError):
    """The server answered with a status outside the 2xx range.

    Args:
        message: Human-readable description of the failure.
        status_code: The HTTP status code returned.
        url: The target URL that failed.
    """

    def __init__(self, message: str, status_code: int, url: str | None = None) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


class AggregatorClosedError(BatchScraperError):
    """Raised when a page is appended after the aggregator has been drained."""
