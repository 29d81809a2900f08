# adoc/report/json_report.py
"""
JSON rendering of crawled pages.
"""
from __future__ import annotations

import json
from typing import Sequence

from adoc.crawler.models import DocPage


def render_json(pages: Sequence[DocPage], pretty: bool = False) -> str:
    """
    Serialize *pages* as a JSON array of page objects.

    :param pages: crawl result
    :param pretty: indent by 2 spaces instead of the compact form
    """
    data = [page.to_dict() for page in pages]
    return json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)
