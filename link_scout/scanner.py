# === FILE: link_scout/scanner.py ===
"""
Модуль-обёртка для функции запуска проверки ссылок.
"""
from datetime import datetime
from typing import Optional

from link_scout.aggregator import CheckReport, build_report
from link_scout.config import CheckerConfig
from link_scout.crawler.crawler import LinkChecker
from link_scout.report.console import ConsoleReporter


async def start_check(cfg: CheckerConfig, reporter: Optional[ConsoleReporter] = None) -> CheckReport:
    """
    Печатает заголовок отчёта, запускает LinkChecker в контексте и
    возвращает сводный CheckReport.

    Parameters
    ----------
    cfg : CheckerConfig
        Конфигурация проверки.
    reporter : ConsoleReporter, optional
        Куда печатать потоковый отчёт (по умолчанию stdout).
    """
    reporter = reporter or ConsoleReporter()
    started_at = datetime.now().astimezone()
    reporter.header(cfg.start_url, started_at)
    async with LinkChecker(cfg, reporter=reporter) as checker:
        result = await checker.check()
    return build_report(cfg.start_url, started_at, result)

__all__ = ["start_check"]
