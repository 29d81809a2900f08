# === FILE: adoc/crawler/crawler.py ===
"""
Crawl orchestrator: fetch a seed page and, when asked, its direct links.

Recursion is one hop deep. Links found on descendant pages are kept in their
``related_links`` but are not fetched.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, List, Optional

from aiohttp import ClientSession, ClientTimeout

from adoc.config import CrawlerConfig
from adoc.crawler.errors import CrawlError
from adoc.crawler.extractor import canonical_url, extract
from adoc.crawler.fetcher import Fetcher
from adoc.crawler.models import DocPage
from adoc.crawler.registry import VisitedRegistry
from adoc.utils import build_search_url

__all__ = ("DocCrawler", "ErrorCallback")

ErrorCallback = Callable[[str, CrawlError], None]


class DocCrawler:
    """Asynchronous documentation crawler with bounded fan-out.

    One instance is one crawl session: its registry remembers every URL
    claimed by any :meth:`crawl` call made on it.
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        *,
        session: Optional[ClientSession] = None,
        registry: Optional[VisitedRegistry] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.registry = registry if registry is not None else VisitedRegistry()
        self.session = session
        self.fetcher: Optional[Fetcher] = Fetcher(session, self.config) if session else None
        self._owns_session = False
        self._on_error = on_error
        self.logger = logging.getLogger("adoc")

    async def __aenter__(self) -> DocCrawler:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_session = True
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, url: str, recursive: bool = False) -> List[DocPage]:
        """
        Crawl *url* and, if *recursive*, every link on it.

        Returns an empty list when *url* was already claimed in this session.
        Errors on the seed page propagate; errors on linked pages are logged,
        passed to ``on_error`` and leave the page out of the result.
        The fragment of *url* is ignored, and a relative URL raises ParseError
        without any request being made.
        """
        url = canonical_url(url)
        if not self.registry.try_claim(url):
            self.logger.debug("Already visited: %s", url)
            return []

        self.logger.info("Crawling %s", url)
        start = time.monotonic()
        seed = await self._fetch_page(url)
        pages = [seed]

        if recursive and seed.related_links:
            pages.extend(await self._fan_out(seed.related_links))

        self.logger.info(
            "Finished %s: %d page(s) in %.2f s", url, len(pages), time.monotonic() - start
        )
        return pages

    async def search_and_crawl(self, keyword: str, recursive: bool = False) -> List[DocPage]:
        """Crawl the search results page for *keyword*."""
        return await self.crawl(build_search_url(keyword, self.config.search_url), recursive)

    async def _fetch_page(self, url: str) -> DocPage:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        url = canonical_url(url)
        html = await self.fetcher.fetch(url)
        return extract(html, url, self.config.domain)

    async def _fan_out(self, links: List[str]) -> List[DocPage]:
        queue: asyncio.Queue[str] = asyncio.Queue()
        for link in links:
            queue.put_nowait(link)
        results: List[DocPage] = []
        slots = min(self.config.concurrency, len(links))
        workers = [asyncio.create_task(self._worker(queue, results)) for _ in range(slots)]
        try:
            await asyncio.gather(*workers)
        finally:
            for w in workers:
                w.cancel()
        return results

    async def _worker(self, queue: asyncio.Queue[str], results: List[DocPage]) -> None:
        while True:
            try:
                link = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            if not self.registry.try_claim(link):
                continue
            try:
                results.append(await self._fetch_page(link))
            except CrawlError as exc:
                self.logger.warning("Skipped %s: %s", link, exc)
                if self._on_error is not None:
                    self._on_error(link, exc)
