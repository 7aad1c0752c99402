#!/usr/bin/env python3
"""
Command-line entry point for the LinkScout broken link checker.

Commands:
  scan      Crawl a site and write the broken link report
  config    Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Diagnostic log level (DEBUG, INFO, ...)
  --log-file PATH     Diagnostic log file (stderr only if omitted)
  --log-format FORMAT Diagnostic log format

scan options:
  --url, -u URL           Base URL to start crawling from
  --concurrency, -n INT   Pages fetched in parallel (default 4)
  --timeout SEC           Per-request timeout
  --report PATH           Text report file (default report.txt)
  --no-report-file        Print the report to the console only
  --json PATH             Also save a JSON report

Extra:
  --version, -v       Show the LinkScout version

Example:
  link_scout scan --url https://example.com -n 8 --json links.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import load_config
from link_scout.crawler.crawler import CrawlError
from link_scout.logger import configure_report, init_logging
from link_scout.report.json_report import render_json
from link_scout.report.text_report import Reporter
from link_scout.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

def build_config(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Diagnostic log level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Diagnostic log file (stderr if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for diagnostic logs'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """LinkScout command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Base URL to start crawling from')
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Number of pages fetched in parallel [default: 4]'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Per-request timeout (seconds)')
@click.option(
    '--report', '-r', 'report_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Text report file [default: report.txt]'
)
@click.option('--no-report-file', is_flag=True, help='Write the report to the console only')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also save a JSON report to this file'
)
@click.pass_context
def scan(ctx, url, concurrency, timeout, report_file, no_report_file, json_output):
    """Crawl the site and report every broken link."""
    cfg = build_config(
        ctx, base_url=url, concurrency=concurrency, timeout=timeout, report_file=report_file
    )
    if no_report_file:
        cfg = cfg.model_copy(update={'report_file': None})

    reporter = Reporter(configure_report(cfg.report_file))
    try:
        summary = asyncio.run(start_scan(cfg, reporter))
    except CrawlError:
        # the error line is already part of the report
        sys.exit(1)
    except Exception as e:
        print_error(f'Scan failed: {e}')

    if json_output:
        try:
            saved_json = render_json(summary, json_output)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Override base URL')
@click.pass_context
def show_config(ctx, url):
    """Print the effective configuration as JSON."""
    cfg = build_config(ctx, base_url=url)
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
