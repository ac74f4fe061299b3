# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска LinkScout через командную строку.

Рекурсивно проверяет страницы сайта на битые ссылки (`href`, `src`, `to`),
т.е. на адреса, которые не отвечают статусом `200 OK`.
Код выхода 0, если все ссылки в порядке, 1 — если найдены ошибки,
2 — при ошибке запуска (нет URL, неверный URL или конфиг).

Опции:
  -v, --verbose        Печатать каждую проверяемую ссылку
  --config PATH        YAML/JSON-конфиг со значениями по умолчанию
  --timeout SEC        Таймаут одного запроса (0 — без таймаута)
  --scan-timeout SEC   Таймаут всей проверки (секунд)
  --json PATH          Сохранить JSON-отчёт в файл
  --html PATH          Сохранить HTML-отчёт в файл
  --template DIR       Папка с Jinja2-шаблоном report.html.j2
  --log-file PATH      Файл для логов (stdout, если не указан)
  --log-format FORMAT  Формат логирования
  --version            Показать версию LinkScout

Пример:
  link_scout -v example.com --json reports/links.json
"""
import asyncio
import sys
from pathlib import Path

import click
from jinja2 import TemplateError

from link_scout import __version__
from link_scout.config import ConfigurationError, build_config
from link_scout.logger import init_logging
from link_scout.scanner import start_check
from link_scout.report.json_report import render_json
from link_scout.report.html_report import render_html

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str, code: int = 1):
    click.secho(message, fg='red', err=True)
    sys.exit(code)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='LinkScout, version %(version)s')
@click.argument('url')
@click.option('--verbose', '-v', 'verbose', is_flag=True, default=False, help='Печатать каждую проверяемую ссылку')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к YAML/JSON-конфигу.'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса, секунд (0 — без таймаута) [30]')
@click.option('--scan-timeout', 'scan_timeout', type=float, default=None, help='Таймаут всей проверки (секунд)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option('--log-format', 'log_format', default=None, help='Строка формата для логов')
def cli(url, verbose, config_path, timeout, scan_timeout, json_output, html_output, template_dir, log_file, log_format):
    """Recursively check URL for dangling links (`href`, `src`, `to`)."""
    try:
        cfg = build_config(
            url,
            config_path,
            verbose=verbose or None,
            timeout=timeout,
            scan_timeout=scan_timeout,
            log_file=log_file,
            log_format=log_format,
        )
    except ConfigurationError as e:
        print_error(f'Configuration error: {e}', code=2)

    init_logging(verbose=cfg.verbose, log_file=cfg.log_file, log_format=cfg.log_format)

    try:
        if cfg.scan_timeout:
            report = asyncio.run(asyncio.wait_for(start_check(cfg), timeout=cfg.scan_timeout))
        else:
            report = asyncio.run(start_check(cfg))
    except asyncio.TimeoutError:
        print_error(f'Check did not finish within {cfg.scan_timeout} seconds')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(report, json_output)}', err=True)
        except OSError as e:
            print_error(f'Error writing JSON report: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(report, template_dir, html_output)}', err=True)
        except (OSError, TemplateError) as e:
            print_error(f'Error writing HTML report: {e}')

    sys.exit(0 if report.errors == 0 else 1)


if __name__ == "__main__":
    cli()
