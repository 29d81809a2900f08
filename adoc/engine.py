# File: adoc/engine.py
"""adoc.engine: glue between the CLI and the crawler."""

from __future__ import annotations

from typing import List

from adoc.config import CrawlerConfig
from adoc.crawler.crawler import DocCrawler
from adoc.crawler.errors import CrawlError
from adoc.crawler.models import DocPage
from adoc.logger import logger

__all__ = ["is_url", "run_crawl"]


def is_url(target: str) -> bool:
    """Inputs starting with ``http`` are URLs, anything else is a search keyword."""
    return target.startswith("http")


async def run_crawl(config: CrawlerConfig, target: str, recursive: bool = False) -> List[DocPage]:
    """Crawl *target* as a URL or as a search keyword and return the pages."""
    async with DocCrawler(config) as crawler:
        try:
            if is_url(target):
                return await crawler.crawl(target, recursive)
            logger.info("Searching for %r", target)
            return await crawler.search_and_crawl(target, recursive)
        except CrawlError as exc:
            logger.error("Crawl of %s failed: %s", target, exc)
            raise
