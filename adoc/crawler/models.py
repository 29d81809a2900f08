# adoc/crawler/models.py
"""
Data models for the adoc crawler.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class DocPage:
    """One extracted documentation page.

    ``related_links`` keeps document order and may repeat a URL; dedup across
    pages belongs to the visited registry.
    """

    title: str
    content: str
    url: str
    related_links: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
