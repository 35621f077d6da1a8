"""Target list loading."""

from __future__ import annotations

import logging
from pathlib import Path

from batch_scraper.core.exceptions import SourceLoadError

logger = logging.getLogger(__name__)


def parse_targets(text: str) -> tuple[str, ...]:
    """Split newline-delimited text into trimmed target URLs.

    Blank and whitespace-only lines are dropped.  Nothing else is
    validated or deduplicated: a malformed URL stays in the list and fails
    later as a transport error for its own unit.
    """
    return tuple(line.strip() for line in text.splitlines() if line.strip())


def load_targets(path: str | Path) -> tuple[str, ...]:
    """Read the target list from *path*.

    Args:
        path: UTF-8 text file with one URL per line.

    Returns:
        The targets in file order.

    Raises:
        SourceLoadError: If the file is missing, unreadable, or not valid UTF-8.
    """
    target_path = Path(path)
    try:
        text = target_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceLoadError(target_path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise SourceLoadError(target_path, f"not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SourceLoadError(target_path, exc.strerror or str(exc)) from exc

    targets = parse_targets(text)
    logger.info("scraper: loaded %d targets from %s", len(targets), target_path)
    return targets
