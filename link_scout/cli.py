# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Аргументы:
  SEED_URL            Стартовый URL (default: https://ecosio.com)

Опции:
  --user-agent UA        Заголовок User-Agent
  --request-timeout SEC  Таймаут одного запроса (секунд)
  --concurrency INT      Число одновременно обрабатываемых страниц
  --drain-timeout SEC    Ожидание завершения обхода (секунд)
  --cancel-timeout SEC   Ожидание после отмены задач (секунд)
  --log-level LEVEL      Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH        Файл для логов (только stderr, если не указан)
  --log-format FORMAT    Формат логирования
  --version, -v          Показать версию LinkScout

Пример:
  link-scout https://example.com --concurrency 8 --log-level DEBUG
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import DEFAULT_SEED_URL, DEFAULT_USER_AGENT, CrawlerConfig
from link_scout.engine import start_crawl
from link_scout.errors import SeedParseError
from link_scout.logger import DEFAULT_FORMAT, init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.argument('seed_url', required=False, default=DEFAULT_SEED_URL)
@click.option(
    '--user-agent', 'user_agent',
    default=DEFAULT_USER_AGENT,
    help='Заголовок User-Agent для запросов.'
)
@click.option(
    '--request-timeout', 'request_timeout',
    type=float, default=30.0, show_default=True,
    help='Таймаут одного запроса (секунд)'
)
@click.option(
    '--concurrency', 'concurrency',
    type=int, default=16, show_default=True,
    help='Число одновременно обрабатываемых страниц'
)
@click.option(
    '--drain-timeout', 'drain_timeout',
    type=float, default=120.0, show_default=True,
    help='Ожидание завершения обхода (секунд)'
)
@click.option(
    '--cancel-timeout', 'cancel_timeout',
    type=float, default=20.0, show_default=True,
    help='Ожидание после отмены задач (секунд)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
def cli(seed_url, user_agent, request_timeout, concurrency, drain_timeout,
        cancel_timeout, log_level, log_file, log_format):
    """Обойти сайт начиная с SEED_URL и вывести найденные хосты, отсортированные по меткам ссылок."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )
    try:
        cfg = CrawlerConfig(
            user_agent=user_agent,
            request_timeout=request_timeout,
            concurrency=concurrency,
            drain_timeout=drain_timeout,
            cancel_timeout=cancel_timeout,
        )
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {e}')

    try:
        pairs = start_crawl(seed_url, cfg)
    except SeedParseError as e:
        print_error(f'Некорректный стартовый URL: {e}')

    click.echo(f'Collection of links for: {seed_url}')
    for host, _label in pairs:
        click.echo(host)


if __name__ == "__main__":
    cli()
