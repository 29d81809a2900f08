# adoc/crawler/extractor.py
"""
Page extraction for adoc: title, article text and in-domain links.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from adoc.config import DEFAULT_DOMAIN
from adoc.crawler.errors import ParseError
from adoc.crawler.models import DocPage
from adoc.utils import is_in_domain, normalize_text

# <article> elements and ARIA article containers, whichever comes first
ARTICLE_SELECTOR = "article, [role=article]"

# elements whose boundaries are line breaks in the extracted text
BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "table",
    "td", "th", "tr", "ul",
)


def canonical_url(url: str) -> str:
    """
    Validate that *url* is absolute and return it without its fragment.

    Raises ParseError for relative or unparsable URLs.
    """
    try:
        parsed = urlparse(url)
        absolute, _ = urldefrag(url)
    except ValueError as exc:
        raise ParseError(url) from exc
    if not parsed.scheme or not parsed.netloc:
        raise ParseError(url)
    return absolute


def block_text(tag: Tag) -> str:
    """Normalized text of *tag* with one line per block-level element."""
    for block in tag.find_all(BLOCK_TAGS):
        block.insert_before("\n")
        block.insert_after("\n")
    return normalize_text(tag.get_text())


def extract_links(soup: BeautifulSoup, source_url: str, domain: str) -> List[str]:
    """
    Absolute in-domain links of every ``<a href>``, in document order.

    Hrefs that cannot be resolved are skipped. Repeats are kept.
    """
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute, _ = urldefrag(urljoin(source_url, href_val.strip()))
        except ValueError:
            continue
        if is_in_domain(absolute, domain):
            links.append(absolute)
    return links


def extract(html: str, source_url: str, domain: str = DEFAULT_DOMAIN) -> DocPage:
    """Build a DocPage from *html* fetched at *source_url*.

    Missing title, article or links give empty values. Raises ParseError
    when *source_url* is not absolute. The fragment of *source_url* is dropped.
    """
    source_url = canonical_url(source_url)
    soup = BeautifulSoup(html, "html.parser")

    heading = soup.find("h1")
    title = block_text(heading) if heading else ""

    article = soup.select_one(ARTICLE_SELECTOR)
    content = block_text(article) if article else ""

    return DocPage(
        title=title,
        content=content,
        url=source_url,
        related_links=extract_links(soup, source_url, domain),
    )
