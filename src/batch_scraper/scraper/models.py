"""Data models for the scraping pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class FailureKind(str, enum.Enum):
    """Why a unit ended without producing a page."""

    TRANSPORT = "transport"
    """Network-level failure: timeout, connection error, malformed URL."""

    PROTOCOL = "protocol"
    """The server answered with a non-2xx status."""

    INTERNAL = "internal"
    """An unexpected exception raised inside the unit itself."""


@dataclass(frozen=True)
class ScrapedPage:
    """Title and outbound links of one successfully fetched target.

    Attributes:
        url: The target string exactly as it appeared in the target list.
        title: Text of the first ``<title>`` element, or the
            ``TITLE_NOT_FOUND`` sentinel.
        links: Raw ``href`` values of every anchor that has one, in document
            order, duplicates kept and relative values left unresolved.
    """

    url: str
    title: str
    links: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScrapeFailure:
    """A target that produced no page."""

    url: str
    reason: str
    kind: FailureKind


@dataclass(frozen=True)
class ScrapeOutcome:
    """Terminal result of one unit of work: exactly one of ``page``/``failure`` is set."""

    url: str
    page: ScrapedPage | None = None
    failure: ScrapeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.page is not None


@dataclass
class ScrapeReport:
    """Everything a finished run produced.

    ``pages`` is in completion order, which is not deterministic;
    ``failures`` is in target-list order.
    """

    pages: list[ScrapedPage] = field(default_factory=list)
    failures: list[ScrapeFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.pages)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed
