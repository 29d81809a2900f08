# adoc/crawler/errors.py
"""Exceptions raised by the crawl engine."""
from __future__ import annotations

from typing import Optional


class CrawlError(Exception):
    """Base class for failures of a single page crawl."""


class FetchError(CrawlError):
    """The page could not be retrieved before the retry budget ran out."""

    def __init__(self, url: str, attempts: int, cause: Optional[BaseException]) -> None:
        super().__init__(f"failed to fetch {url} after {attempts} attempt(s): {cause}")
        self.url = url
        self.attempts = attempts
        self.cause = cause


class ParseError(CrawlError, ValueError):
    """The source URL of a page is not a valid absolute URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"not an absolute URL: {url!r}")
        self.url = url
