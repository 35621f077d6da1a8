"""Async HTTP fetcher.

Uses ``httpx`` for all HTTP requests.  A fetch never raises for network
or protocol conditions: every outcome is described by a
:class:`FetchResult`, and :meth:`FetchResult.raise_for_error` turns a
failed result into the matching :mod:`batch_scraper.core.exceptions`
class when the caller prefers exceptions.

Failures are logged at DEBUG only.  The caller owns the single ERROR
record reported per failed target.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx

from batch_scraper.core.exceptions import ProtocolError, TransportError
from batch_scraper.scraper.config import SUCCESS_STATUS_MAX, SUCCESS_STATUS_MIN
from batch_scraper.scraper.models import FailureKind

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class FetchResult:
    """Result of a single HTTP fetch attempt.

    Attributes:
        body: Raw response body, or ``None`` if the fetch failed.
        status_code: HTTP status code, or ``None`` on transport error.
        final_url: URL after following redirects, or the requested URL on
            transport error.
        error: Human-readable error description, or ``None`` on success.
        kind: Failure classification, or ``None`` on success.
    """

    body: bytes | None
    status_code: int | None
    final_url: str | None
    error: str | None
    kind: FailureKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the exception matching this result's failure, if any.

        Raises:
            ProtocolError: For a non-2xx response.
            TransportError: For any network-level failure.
        """
        if self.error is None:
            return
        if self.kind is FailureKind.PROTOCOL and self.status_code is not None:
            raise ProtocolError(self.error, status_code=self.status_code, url=self.final_url)
        raise TransportError(self.error, url=self.final_url)


# ---------------------------------------------------------------------------
# Status classification
# ---------------------------------------------------------------------------


def _is_success_status(status_code: int) -> bool:
    """Return ``True`` if *status_code* is in the 2xx range."""
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX


def _status_error(response: httpx.Response) -> str:
    """Describe a non-2xx response, e.g. ``"... status code: 404 Not Found"``."""
    status = str(response.status_code)
    if response.reason_phrase:
        status = f"{status} {response.reason_phrase}"
    return f"HTTP request failed with status code: {status}"


def _transport_failure(url: str, error: str) -> FetchResult:
    return FetchResult(
        body=None,
        status_code=None,
        final_url=url,
        error=error,
        kind=FailureKind.TRANSPORT,
    )


# ---------------------------------------------------------------------------
# Public fetch function
# ---------------------------------------------------------------------------


async def fetch_url(
    url: str,
    *,
    client: httpx.AsyncClient,
    timeout: float,
) -> FetchResult:
    """Fetch a single URL with one ``GET`` request.

    Redirects are followed.  No retries are attempted.

    Args:
        url: Target URL to fetch.
        client: Shared :class:`httpx.AsyncClient` instance.
        timeout: Timeout in seconds for the whole request.

    Returns:
        A :class:`FetchResult`.  ``error`` is ``"timeout"`` when *timeout*
        elapses and ``"HTTP request failed with status code: <code>"`` for a
        response outside the 2xx range.
    """
    try:
        # httpx timeouts apply per network operation; wait_for bounds the total.
        response = await asyncio.wait_for(
            client.get(url, timeout=timeout, follow_redirects=True),
            timeout=timeout,
        )
    except (httpx.TimeoutException, asyncio.TimeoutError):
        logger.debug("scraper: timeout fetching %s", url)
        return _transport_failure(url, "timeout")
    except httpx.TooManyRedirects:
        logger.debug("scraper: too many redirects for %s", url)
        return _transport_failure(url, "too many redirects")
    except httpx.RequestError as exc:
        logger.debug("scraper: request error for %s: %s", url, exc)
        return _transport_failure(url, f"request error: {exc}")
    except httpx.InvalidURL as exc:
        logger.debug("scraper: invalid URL %r: %s", url, exc)
        return _transport_failure(url, f"invalid URL: {exc}")

    final_url = str(response.url)

    if not _is_success_status(response.status_code):
        logger.debug("scraper: HTTP %d for %s", response.status_code, url)
        return FetchResult(
            body=None,
            status_code=response.status_code,
            final_url=final_url,
            error=_status_error(response),
            kind=FailureKind.PROTOCOL,
        )

    return FetchResult(
        body=response.content,
        status_code=response.status_code,
        final_url=final_url,
        error=None,
    )
