#!/usr/bin/env python3
"""
Точка входа jscrawler: читает URL из stdin и печатает найденные JS-ссылки.

Опции:
  --timeout SEC       Таймаут HTTP-запроса (default: 15)
  --threads, -t INT   Число одновременных загрузок (default: 50)
  --complete          Приводить ссылки к абсолютным URL
  --output, -o PATH   Дописывать результаты в файл
  --config, -c PATH   YAML/JSON конфиг (явные флаги имеют приоритет)
  --silent            Не печатать баннер
  --verbose           Диагностика в stderr
  --log-file PATH     Дублировать диагностику в файл (с ротацией)
  --version           Показать версию и выйти

Пример:
  cat urls.txt | jscrawler --complete -o js.txt
"""
import asyncio
import sys
from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError

from jscrawler.banner import print_banner, print_version
from jscrawler.config import load_config
from jscrawler.engine import start_crawl
from jscrawler.exceptions import InputError, OutputOpenError
from jscrawler.logger import init_logging
from jscrawler.utils import read_urls

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

_CONFIG_FIELDS = ("timeout", "threads", "complete", "output", "verbose", "silent")


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option('--timeout', type=float, default=15.0, show_default=True,
              help='Timeout (in seconds) for http client')
@click.option('--threads', '-t', type=int, default=50, show_default=True,
              help='Number of threads to use')
@click.option('--complete', is_flag=True, help='Get Complete URL')
@click.option('--output', '-o', default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help='Output file to save results')
@click.option('--config', '-c', 'config_path', default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Путь к YAML/JSON конфигу.')
@click.option('--silent', is_flag=True, help='Silent mode.')
@click.option('--verbose', is_flag=True, help='Enable verbose output for debugging purposes.')
@click.option('--log-file', 'log_file', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Путь к файлу логов (только stderr, если не указан)')
@click.option('--version', 'show_version', is_flag=True,
              help='Print the version of the tool and exit.')
@click.pass_context
def cli(ctx, timeout, threads, complete, output, config_path, silent, verbose, log_file, show_version):
    """Extract JavaScript links from the pages listed on stdin."""
    if show_version:
        print_banner()
        print_version()
        return

    # только флаги, переданные явно, перекрывают значения из конфига
    overrides = {
        name: ctx.params[name]
        for name in _CONFIG_FIELDS
        if config_path is None or ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }
    try:
        cfg = load_config(config_path, **overrides)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    init_logging(verbose=cfg.verbose, log_file=log_file)

    if not cfg.silent:
        print_banner()

    try:
        urls = read_urls(click.get_text_stream('stdin'))
    except InputError as e:
        print_error(str(e))

    if not urls:
        return

    try:
        asyncio.run(start_crawl(urls, cfg))
    except OutputOpenError as e:
        print_error(str(e))


if __name__ == "__main__":
    cli()
