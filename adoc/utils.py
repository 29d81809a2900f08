# File: adoc/utils.py
"""adoc.utils: helpers for text normalization, domain checks, search URLs and anchors."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence
from urllib.parse import quote, urlparse

__all__: Sequence[str] = (
    "normalize_text",
    "is_in_domain",
    "build_search_url",
    "slugify",
    "unique_anchors",
)

_WS_RE = re.compile(r"\s+")
_SLUG_DROP_RE = re.compile(r"[^\w\- ]", re.UNICODE)


def normalize_text(text: str) -> str:
    """Collapse whitespace inside each line, drop blank lines, join with newlines."""
    lines = (_WS_RE.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line).strip()


def is_in_domain(url: str, domain: str) -> bool:
    """True for http(s) URLs whose host equals *domain* (case-insensitive)."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        return False
    try:
        host = parsed.hostname
    except ValueError:
        return False
    return host is not None and host == domain.lower()


def build_search_url(keyword: str, template: str) -> str:
    """Substitute the percent-encoded *keyword* into the search *template*."""
    return template.replace("{query}", quote(keyword, safe=""))


def slugify(text: str) -> str:
    """GitHub-style heading anchor: lower-case, punctuation dropped, spaces to hyphens."""
    slug = _SLUG_DROP_RE.sub("", text.strip().lower())
    return slug.replace(" ", "-")


def unique_anchors(titles: Iterable[str]) -> List[str]:
    """Slug every title, suffixing repeats with -1, -2, ... in order."""
    seen: dict[str, int] = {}
    anchors: List[str] = []
    for title in titles:
        base = slugify(title)
        count = seen.get(base, 0)
        anchors.append(base if count == 0 else f"{base}-{count}")
        seen[base] = count + 1
    return anchors
