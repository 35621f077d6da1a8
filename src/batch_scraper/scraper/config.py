"""Constants and tuning parameters for the batch scraper."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

#: Target list read when no path is given on the command line.
DEFAULT_TARGETS_FILE: str = "targets.txt"

# ---------------------------------------------------------------------------
# Fetch timing
# ---------------------------------------------------------------------------

#: Default HTTP request timeout in seconds, applied to the whole request.
DEFAULT_TIMEOUT: float = 10.0

#: Default pause (seconds) between two consecutive unit launches.
DEFAULT_LAUNCH_DELAY: float = 1.0

#: Default cap on units in the fetch+extract phase at once.
DEFAULT_MAX_CONCURRENCY: int = 10

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: User-agent string sent with every HTTP request.
USER_AGENT: str = "BatchScraper/0.1 (+https://github.com/batch-scraper)"

#: Inclusive bounds of the status codes treated as success.
SUCCESS_STATUS_MIN: int = 200
SUCCESS_STATUS_MAX: int = 299

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

#: Title reported for pages without a ``<title>`` element.
TITLE_NOT_FOUND: str = "Title element not found"

#: Link value reported when an anchor's ``href`` cannot be read.
MISSING_HREF: str = "N/A"
