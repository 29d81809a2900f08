# File: tests/conftest.py
from collections.abc import AsyncIterator

import pytest
from aiohttp import web

from adoc.config import CrawlerConfig
from adoc.crawler.models import DocPage


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_page(title: str = "", body: str = "", links: tuple[str, ...] = ()) -> str:
    anchors = "".join(f'<a href="{href}">{href}</a>' for href in links)
    heading = f"<h1>{title}</h1>" if title else ""
    return f"<html><body>{heading}<article>{body}</article><nav>{anchors}</nav></body></html>"


@pytest.fixture()
def local_config() -> CrawlerConfig:
    """
    Config pointed at the local test server with a short retry budget.
    """
    return CrawlerConfig(
        domain="localhost",
        timeout=2.0,
        concurrency=2,
        max_retries=2,
        initial_interval=0.01,
        multiplier=2.0,
        randomization_factor=0.0,
        search_url="http://localhost/search?q={query}",
    )


@pytest.fixture()
def sample_pages() -> list[DocPage]:
    return [
        DocPage(
            title="Swift",
            content="Swift is a language.\nIt is fast.",
            url="https://developer.apple.com/documentation/swift",
            related_links=["https://developer.apple.com/documentation/swiftui"],
        ),
        DocPage(
            title="",
            content="",
            url="https://developer.apple.com/documentation/empty",
            related_links=[],
        ),
    ]


class FakeClock:
    """Monotonic clock that only advances when the fetcher sleeps."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay
