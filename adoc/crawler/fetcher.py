# adoc/crawler/fetcher.py
"""
Fetcher module: one GET per attempt, retried with time-budgeted exponential backoff.
"""
from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import Awaitable, Callable, Optional

from aiohttp import ClientError, ClientSession

from adoc.config import CrawlerConfig
from adoc.crawler.backoff import ExponentialBackoff
from adoc.crawler.errors import FetchError

logger = logging.getLogger("adoc")


class Fetcher:
    """Retrieves page HTML through a shared ``ClientSession``.

    Holds no per-request state, so one instance serves every concurrent task.
    """

    def __init__(
        self,
        session: ClientSession,
        config: CrawlerConfig,
        backoff: Optional[ExponentialBackoff] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.session = session
        self.config = config
        self.backoff = backoff or ExponentialBackoff.from_config(config)
        self._clock = clock
        self._sleep = sleep

    async def fetch(self, url: str) -> str:
        """
        Return the body of *url* as text.

        Connection errors, timeouts and non-success statuses are retried until
        the backoff policy gives up, then FetchError carries the last cause.
        """
        start = self._clock()
        attempts = 0
        while True:
            attempts += 1
            try:
                return await self._get(url)
            except (ClientError, asyncio.TimeoutError) as exc:
                delay = self.backoff.next_delay(attempts, self._clock() - start, random.random())
                if delay is None:
                    raise FetchError(url, attempts, exc) from exc
                logger.debug("Retry %d for %s after %.2f s: %s", attempts, url, delay, exc)
                await self._sleep(delay)

    async def _get(self, url: str) -> str:
        async with self.session.get(url, raise_for_status=True) as resp:
            return await resp.text(errors="replace")
