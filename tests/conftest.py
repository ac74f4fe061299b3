# File: tests/conftest.py
from datetime import datetime, timezone

import pytest

from link_scout.aggregator import CheckReport, build_report
from link_scout.crawler.models import CrawlResult, Link
from link_scout.logger import init_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI runs rebind the log handler to a temporary stream; restore it afterwards."""
    yield
    init_logging()


@pytest.fixture()
def started_at() -> datetime:
    """Fixed report timestamp."""
    return datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture()
def broken_link() -> Link:
    return Link("http://example.com/", "http://example.com/missing")


@pytest.fixture()
def failing_report(started_at, broken_link) -> CheckReport:
    """
    Return a CheckReport with two checked targets and one broken link.
    """
    result = CrawlResult(checked=2, failures=[broken_link])
    return build_report("http://example.com/", started_at, result)


@pytest.fixture()
def clean_report(started_at) -> CheckReport:
    return build_report("http://example.com/", started_at, CrawlResult(checked=5))
