# File: adoc/report/template_report.py
"""adoc.report.template_report: plain-text and Markdown rendering with Jinja2."""

from __future__ import annotations

from typing import Sequence

from jinja2 import Environment, PackageLoader

from adoc.crawler.models import DocPage
from adoc.utils import unique_anchors

PREVIEW_CHARS = 200

# headings the markdown template emits before any page section
_FIXED_HEADINGS = ("Documentation", "Table of Contents")


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[:limit] + "..."


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("adoc.report", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["preview"] = _preview
    return env


_ENV = _environment()


def render_text(pages: Sequence[DocPage]) -> str:
    """Full text dump: title, URL and content of every page."""
    return _ENV.get_template("pages.txt.j2").render(pages=pages)


def render_summary(pages: Sequence[DocPage]) -> str:
    """Short console preview of every page."""
    return _ENV.get_template("summary.txt.j2").render(pages=pages)


def render_markdown(pages: Sequence[DocPage]) -> str:
    """Markdown document with a table of contents linking to one section per page.

    Pages without a title are headed by their URL.
    """
    headings = [page.title or page.url for page in pages]
    anchors = unique_anchors([*_FIXED_HEADINGS, *headings])[len(_FIXED_HEADINGS):]
    entries = list(zip(headings, anchors, pages))
    return _ENV.get_template("pages.md.j2").render(entries=entries)
