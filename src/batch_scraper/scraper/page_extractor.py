"""Title and link extraction from raw page bytes.

Parsing uses BeautifulSoup with the stdlib ``html.parser`` backend, which
builds a best-effort tree for any input, so extraction never fails on
malformed markup: missing pieces fall back to the sentinels defined in
:mod:`batch_scraper.scraper.config`.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from batch_scraper.scraper.config import MISSING_HREF, TITLE_NOT_FOUND
from batch_scraper.scraper.models import ScrapedPage


def decode_body(body: bytes) -> str:
    """Decode *body* as UTF-8, replacing invalid sequences with U+FFFD."""
    return body.decode("utf-8", errors="replace")


def _extract_title(soup: BeautifulSoup) -> str:
    """Return the text of the first ``<title>`` element, or the sentinel.

    Text nodes inside the element are joined with single spaces and left
    otherwise untouched.
    """
    title = soup.find("title")
    if not isinstance(title, Tag):
        return TITLE_NOT_FOUND
    return " ".join(title.strings)


def _extract_links(soup: BeautifulSoup) -> list[str]:
    """Return the ``href`` of every anchor that has one, in document order.

    Duplicates, fragments and relative values are kept as written.
    """
    links: list[str] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        links.append(href if href is not None else MISSING_HREF)
    return links


def extract_page(url: str, body: bytes) -> ScrapedPage:
    """Build a :class:`ScrapedPage` from a fetched body.

    Args:
        url: The target URL, echoed verbatim into the result.
        body: Raw response bytes.

    Returns:
        The extracted page.  Never raises for malformed markup.
    """
    soup = BeautifulSoup(decode_body(body), "html.parser")
    return ScrapedPage(
        url=url,
        title=_extract_title(soup),
        links=tuple(_extract_links(soup)),
    )
