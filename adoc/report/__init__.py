# File: adoc/report/__init__.py
"""adoc.report: output formats for crawl results and saving them to disk."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Union

from adoc.crawler.models import DocPage
from adoc.report.json_report import render_json
from adoc.report.template_report import render_markdown, render_summary, render_text


class OutputFormat(str, Enum):
    """Supported renderings of a page list."""

    JSON = "json"
    PRETTY_JSON = "pretty-json"
    TEXT = "text"
    MARKDOWN = "markdown"


_BY_SUFFIX = {
    ".json": OutputFormat.PRETTY_JSON,
    ".md": OutputFormat.MARKDOWN,
    ".markdown": OutputFormat.MARKDOWN,
    ".txt": OutputFormat.TEXT,
}


def render(pages: Sequence[DocPage], fmt: Union[OutputFormat, str]) -> str:
    """Render *pages* in the given format."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON:
        return render_json(pages)
    if fmt is OutputFormat.PRETTY_JSON:
        return render_json(pages, pretty=True)
    if fmt is OutputFormat.TEXT:
        return render_text(pages)
    return render_markdown(pages)


def format_for_path(path: Union[str, Path]) -> OutputFormat:
    """Pick the output format from the file extension, JSON when unknown."""
    return _BY_SUFFIX.get(Path(path).suffix.lower(), OutputFormat.JSON)


def save_results(
    pages: Sequence[DocPage],
    path: Union[str, Path],
    fmt: Optional[Union[OutputFormat, str]] = None,
) -> Path:
    """Render *pages* and write them to *path*, creating parent folders."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(render(pages, fmt or format_for_path(p)), encoding="utf-8")
    return p


__all__ = [
    "OutputFormat",
    "format_for_path",
    "render",
    "render_json",
    "render_markdown",
    "render_summary",
    "render_text",
    "save_results",
]
