#!/usr/bin/env python3
"""
Command-line entry point of the PolicyScout scraper.

Collects privacy-policy URLs of Google Play apps, starting from one app page
and following its "Similar apps" links.

Options:
  --url URL                 Seed app-listing URL (required here or in the config)
  --depth INT               Maximum traversal depth (default: 10)
  --directory PATH          Output directory (default: ./data/)
  --filename NAME           Output file name (default: policy.txt)
  --append / --overwrite    Resume into the existing file or rewrite it
  --config PATH             YAML/JSON config; explicit options win over it
  --settle-timeout MS       Wait after opening the details panel
  --navigation-timeout MS   Per-navigation timeout
  --headless / --headed     Browser mode
  --revisit-pages           Allow navigating the same app page more than once
  --log-level LEVEL         Logging level (DEBUG, INFO, ...)
  --log-file PATH           Also write logs to this file
  --version, -v             Show the version

Example:
  policy-scout --url "https://play.google.com/store/apps/details?id=com.example" --depth 3 --append
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from policy_scout import __version__
from policy_scout.config import load_config
from policy_scout.engine import start_scan
from policy_scout.errors import BadConnectionError, PolicyScoutError
from policy_scout.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PolicyScout, version %(version)s')
@click.option('--url', '-u', 'url', default=None, help='URL of the seed Google Play app page.')
@click.option('--depth', '-d', 'depth', type=click.IntRange(min=0), default=None,
              help='Maximum traversal depth  [default: 10]')
@click.option('--directory', 'directory', default=None,
              type=click.Path(file_okay=False, path_type=Path),
              help='Destination directory  [default: ./data/]')
@click.option('--filename', 'filename', default=None,
              help='Destination file  [default: policy.txt]')
@click.option('--append/--overwrite', 'append', default=None,
              help='Append to the destination file instead of rewriting it.')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option('--settle-timeout', 'settle_timeout', type=click.IntRange(min=0), default=None,
              help='Milliseconds to wait after opening the details panel  [default: 2000]')
@click.option('--navigation-timeout', 'navigation_timeout', type=click.IntRange(min=0), default=None,
              help='Per-navigation timeout in milliseconds  [default: 30000]')
@click.option('--headless/--headed', 'headless', default=None, help='Run the browser headless.')
@click.option('--revisit-pages', 'revisit_pages', is_flag=True, default=False,
              help='Allow navigating the same app page more than once.')
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
    help='Log file path (stdout only if omitted)'
)
def cli(url, depth, directory, filename, append, config_path, settle_timeout,
        navigation_timeout, headless, revisit_pages, log_level, log_file):
    """Google Play developer privacy policy dataset curator."""
    init_logging(level=log_level, log_file=log_file)

    try:
        cfg = load_config(
            config_path,
            url=url,
            depth=depth,
            directory=directory,
            filename=filename,
            append=append,
            settle_timeout=settle_timeout,
            navigation_timeout=navigation_timeout,
            headless=headless,
            skip_visited_pages=False if revisit_pages else None,
        )
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f'Configuration error: {e}')
    if cfg.url is None:
        print_error('Missing seed URL: pass --url or set "url" in the config file')

    try:
        result = asyncio.run(start_scan(cfg))
    except BadConnectionError as e:
        print_error(f'Connection was unsuccessful. Try again at another time. {e}')
    except PolicyScoutError as e:
        print_error(f'Scraping failed: {e}')

    summary = result.summary()
    click.echo(f"Saved {summary['policies']} policies to {summary['output']}")
    click.echo(
        f"  new: {summary['policies_added']}, already seen: {summary['policies_seen']}, "
        f"navigations: {summary['navigations']}, failed: {summary['failed_navigations']}, "
        f"skipped revisits: {summary['pages_skipped']}"
    )


if __name__ == "__main__":
    cli()
