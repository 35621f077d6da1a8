"""Configuration package for the batch scraper.

Re-exports the settings symbols so that callers can write::

    from batch_scraper.config import get_settings
"""

from __future__ import annotations

from batch_scraper.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
