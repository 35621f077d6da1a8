"""Batch scraper: fetch a fixed list of pages concurrently and report their
titles and outbound links."""

__version__ = "0.1.0"
