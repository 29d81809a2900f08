"""adoc.crawler: the concurrent crawl engine."""
from adoc.crawler.crawler import DocCrawler
from adoc.crawler.errors import CrawlError, FetchError, ParseError
from adoc.crawler.models import DocPage
from adoc.crawler.registry import VisitedRegistry

__all__ = ["DocCrawler", "DocPage", "VisitedRegistry", "CrawlError", "FetchError", "ParseError"]
