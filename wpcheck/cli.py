"""CLI for wpcheck - compare WordPress installations against the latest release."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace

import click

from wpcheck import __version__
from wpcheck.config import DEFAULT_CONFIG, HTTP_TIMEOUT, WP_API_URL
from wpcheck.errors import FetchError, FilesystemError
from wpcheck.fetcher import fetch_latest_version
from wpcheck.locator import find_version_files
from wpcheck.reader import read_installed_version
from wpcheck.reporter import build_report, render_report
from wpcheck.schemas import Installation

logger = logging.getLogger(__name__)

# Exit codes
EXIT_FETCH_FAILED = 3
EXIT_FILESYSTEM_ERROR = 4


def _configure_logging(verbosity: int) -> None:
    """Send log records to stderr; -v for INFO, -vv for DEBUG."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _require_path(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Reject an empty PATH before anything is fetched or scanned."""
    if not value.strip():
        raise click.BadParameter("path must not be empty", ctx=ctx, param=param)
    return value


@click.command()
@click.version_option(version=__version__, prog_name="wpcheck")
@click.argument("path", callback=_require_path)
@click.option(
    "--exclude", "-e",
    "excludes",
    multiple=True,
    help="Gitignore-style pattern of paths to skip (repeatable)",
)
@click.option(
    "--api-url",
    default=WP_API_URL,
    show_default=True,
    help="Version-check API endpoint",
)
@click.option(
    "--timeout",
    default=HTTP_TIMEOUT,
    show_default=True,
    type=float,
    help="HTTP timeout in seconds",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Output raw JSON instead of formatted text",
)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)")
def main(
    path: str,
    excludes: tuple[str, ...],
    api_url: str,
    timeout: float,
    raw: bool,
    verbose: int,
) -> None:
    """Check WordPress installations under PATH against the latest release.

    Looks for wp-includes/version.php files, reads the installed version
    from each one and compares it with the latest version published on
    WordPress.org. Purely informational, nothing is changed.

    \b
    Example:
        wpcheck /var/www
        wpcheck /srv/sites --exclude backups --raw
    """
    _configure_logging(verbose)
    config = replace(DEFAULT_CONFIG, api_url=api_url, timeout=timeout, excludes=excludes)
    platform = config.platform_name

    try:
        latest_version = fetch_latest_version(config)
    except FetchError as e:
        logger.debug(f"Fetch failed: {e}")
        click.echo("Failed to fetch latest version. Try again later.", err=True)
        sys.exit(EXIT_FETCH_FAILED)

    if not raw:
        click.echo(f"Latest {platform} version: {latest_version}")

    try:
        files = find_version_files(path, config)
    except FilesystemError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FILESYSTEM_ERROR)

    if not files and not raw:
        click.echo(f"Did not find any {platform} version files in {path}")
        return

    installations = [
        Installation(
            marker_file_path=str(file_path),
            installed_version=read_installed_version(file_path, config.version_variable),
            marker_suffix=config.marker_suffix,
        )
        for file_path in files
    ]
    report = build_report(latest_version, installations)

    if raw:
        click.echo(json.dumps(report.model_dump(mode="json"), indent=2))
        return

    for line in render_report(report):
        click.echo(line)


if __name__ == "__main__":
    main()
