# adoc/crawler/registry.py
"""
Visited registry: the set of URLs already claimed in one crawl session.
"""
from __future__ import annotations

import threading
from typing import Set


class VisitedRegistry:
    """Concurrency-safe set of claimed URLs.

    :meth:`try_claim` is the only way to add a URL. Checking and inserting
    happen under one lock, so of any number of racing callers exactly one
    wins a given URL.
    """

    def __init__(self) -> None:
        self._claimed: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Mark *url* as claimed. False if it was claimed before."""
        with self._lock:
            if url in self._claimed:
                return False
            self._claimed.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._claimed

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)
