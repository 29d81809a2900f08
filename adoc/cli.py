# === FILE: adoc/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for the adoc documentation crawler.

Commands:
  crawl     Crawl a documentation URL or search keyword and print/save pages
  config    Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format string

crawl options:
  --recursive         Also crawl the pages linked from the first page
  --output PATH       Save results to a file (format from extension)
  --format FORMAT     json, pretty-json, text or markdown
  --max-retries N     Override max_retries
  --concurrency N     Override concurrency
  --timeout SEC       Override timeout

Example:
  adoc crawl https://developer.apple.com/documentation/swift -r -o swift.md
  adoc crawl SwiftUI --format pretty-json
"""
import sys
import asyncio
from pathlib import Path

import click

from adoc import __version__
from adoc.config import load_config
from adoc.crawler.errors import CrawlError
from adoc.engine import run_crawl
from adoc.logger import DEFAULT_FORMAT, configure
from adoc.report import OutputFormat, render, render_summary, save_results

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])
FORMAT_CHOICES = [f.value for f in OutputFormat]


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='adoc, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Apple developer documentation crawler."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('target')
@click.option(
    '--recursive', '-r', is_flag=True,
    help='Also crawl the pages linked from the first page'
)
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save results to this file'
)
@click.option(
    '--format', '-f', 'fmt',
    default=None,
    type=click.Choice(FORMAT_CHOICES),
    help='Output format (default: by file extension, text summary on stdout)'
)
@click.option('--max-retries', type=click.IntRange(min=0), default=None, help='Override max_retries')
@click.option('--concurrency', type=click.IntRange(min=1), default=None, help='Override concurrency')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=None, help='Override timeout (seconds)')
@click.pass_context
def crawl(ctx, target, recursive, output, fmt, max_retries, concurrency, timeout):
    """Crawl TARGET, a documentation URL or a search keyword."""
    overrides = {
        key: value
        for key, value in (('max_retries', max_retries), ('concurrency', concurrency), ('timeout', timeout))
        if value is not None
    }
    cfg = ctx.obj['config'].model_copy(update=overrides)
    try:
        pages = asyncio.run(run_crawl(cfg, target, recursive))
    except CrawlError as e:
        print_error(f'Crawl failed: {e}')

    if output is None:
        text = render(pages, fmt) if fmt else render_summary(pages)
        click.echo(text, nl=not text.endswith('\n'))
        return

    try:
        saved = save_results(pages, output, fmt)
    except OSError as e:
        print_error(f'Failed to save results: {e}')
    click.echo(f'Saved {len(pages)} page(s) to {saved}', err=True)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
