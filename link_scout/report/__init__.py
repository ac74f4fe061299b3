# File: link_scout/report/__init__.py
"""link_scout.report: консольный, JSON и HTML отчёты о проверке ссылок."""

from link_scout.report.console import ConsoleReporter
from link_scout.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from link_scout.report.json_report import render_json

__all__ = ["ConsoleReporter", "DEFAULT_TEMPLATE_DIR", "render_html", "render_json"]
