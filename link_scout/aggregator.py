# File: link_scout/aggregator.py
"""link_scout.aggregator: сводный отчёт о проверке ссылок."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import List, TypedDict

from link_scout.crawler.models import CrawlResult


class FailureInfo(TypedDict):
    """Битая ссылка: страница-источник и недоступный адрес."""

    source: str
    target: str


@dataclass(slots=True)
class CheckReport:
    """Результат проверки сайта: число проверенных адресов и битые ссылки."""

    start_url: str
    started_at: str
    checked: int = 0
    failures: List[FailureInfo] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return len(self.failures)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        output = asdict(self)
        output["errors"] = self.errors
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)


def build_report(start_url: str, started_at: datetime, result: CrawlResult) -> CheckReport:
    """Собирает CheckReport из результата обхода."""
    return CheckReport(
        start_url=start_url,
        started_at=started_at.isoformat(timespec="seconds"),
        checked=result.checked,
        failures=[{"source": f.source, "target": f.target} for f in result.failures],
    )
