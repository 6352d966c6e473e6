"""CLI interface for dirspace."""

from __future__ import annotations

import logging
import sys

import click

from dirspace.core.dispatcher import ScanError, analyze
from dirspace.settings import Settings
from dirspace.views import print_report, print_summary, render_json

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command()
@click.option("-p", "--path", default=".", show_default=True, help="Directory to analyze")
@click.option("-s", "--sort/--no-sort", "sort_by_size", default=None, help="Sort entries by size, largest first")
@click.option("-j", "--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-c", "--chart/--no-chart", "show_chart", default=None, help="Show an ASCII bar chart")
@click.option("-r", "--recursive", is_flag=True, help="List every file and directory of the tree")
@click.option("-S", "--summary", "summary_only", is_flag=True, help="Only show path, total size and item count")
@click.option("-e", "--exclude", "excludes", multiple=True, metavar="NAME",
              help="Skip this name among the root's children (repeatable)")
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None, help="Number of scanning threads")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(package_name="dirspace", prog_name="dirspace")
def main(
    path: str,
    sort_by_size: bool | None,
    as_json: bool,
    show_chart: bool | None,
    recursive: bool,
    summary_only: bool,
    excludes: tuple[str, ...],
    workers: int | None,
    verbose: int,
) -> None:
    """Show how much disk space a directory uses."""
    _setup_logging(verbose)
    settings = Settings()

    patterns = [*settings.excludes(), *excludes]
    if sort_by_size is None:
        sort_by_size = settings.flag("display.sort")
    if show_chart is None:
        show_chart = settings.flag("display.chart")
    workers = workers or settings.workers()

    try:
        report = analyze(path, recursive=recursive, patterns=patterns, workers=workers)
    except ScanError as exc:
        log.debug("Scan of %s failed", path, exc_info=True)
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {exc}", err=True)
        sys.exit(1)

    if sort_by_size:
        report = report.sorted_by_size()

    if as_json:
        click.echo(render_json(report, summary_only=summary_only))
    elif summary_only:
        print_summary(report)
    else:
        print_report(report, show_chart=show_chart)
