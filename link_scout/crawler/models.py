# link_scout/crawler/models.py
"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class Link:
    """A reference found on page ``source`` that points to ``target``."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"Link{{from: {self.source}, to: {self.target}}}"


@dataclass(slots=True)
class CrawlResult:
    """Outcome of one crawl: number of checked targets and failed links."""

    checked: int = 0
    failures: List[Link] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return len(self.failures)
