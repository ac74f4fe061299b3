# File: link_scout/report/console.py
"""link_scout.report.console: потоковый текстовый отчёт в stdout."""

from __future__ import annotations

from datetime import datetime
from typing import IO, Optional

import click

from link_scout.crawler.models import Link


class ConsoleReporter:
    """Prints the report header, each failed link as it arrives, and the totals."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self.stream = stream

    def header(self, url: str, when: datetime) -> None:
        click.echo(f"Report for URL {url} ({when.isoformat(timespec='seconds')})", file=self.stream)

    def failure(self, link: Link) -> None:
        click.echo(f"NotFoundError: {link.source} -> {link.target}", file=self.stream)

    def summary(self, checked: int, errors: int) -> None:
        click.echo(f"Checked {checked} hrefs, {errors} errors", file=self.stream)
