"""Terminal rendering of scan reports."""

from __future__ import annotations

import json

import click
from rich.cells import cell_len

from dirspace.models.report import Report
from dirspace.utils import format_size, printable_name, terminal_width, truncate_filename

SIZE_WIDTH = 12
BAR_WIDTH = 40
_CHART_WIDTH = BAR_WIDTH + 2
_ICON_WIDTH = 3
_SPACING = 2


def name_column_width(width: int, show_chart: bool) -> int:
    """Width available for entry names on a *width*-column terminal."""
    chart_width = _CHART_WIDTH if show_chart else 0
    available = max(0, width - (_ICON_WIDTH + SIZE_WIDTH + chart_width + _SPACING * 2))
    if show_chart:
        return max(20, min(available, 50))
    return max(30, min(available, 80))


def bar_length(size: int, max_size: int) -> int:
    """Number of bar cells for *size* relative to the largest entry."""
    if max_size <= 0:
        return 0
    return min(BAR_WIDTH, round(size / max_size * BAR_WIDTH))


def render_json(report: Report, summary_only: bool = False) -> str:
    data = report.summary().to_dict() if summary_only else report.to_dict()
    return json.dumps(data, indent=2)


def print_summary(report: Report) -> None:
    """Print path, total size and item count."""
    rule = click.style("═" * terminal_width(), fg="cyan", bold=True)
    click.echo(rule)
    _print_header(report)
    click.echo(
        f"{click.style('Items:', fg='green', bold=True)} "
        f"{click.style(str(len(report.entries)), fg='yellow', bold=True)}"
    )
    click.echo(rule)


def print_report(report: Report, show_chart: bool = False) -> None:
    """Print one line per entry, optionally with a proportional bar."""
    name_width = name_column_width(terminal_width(), show_chart)
    line_width = (
        _ICON_WIDTH + name_width + SIZE_WIDTH + (_CHART_WIDTH if show_chart else 0) + _SPACING * 2
    )
    rule = click.style("═" * line_width, fg="cyan", bold=True)

    click.echo(rule)
    _print_header(report)
    click.echo(rule)

    if not report.entries:
        click.echo(click.style("Directory is empty", fg="yellow"))
        return

    max_size = max(e.size for e in report.entries)
    for entry in report.entries:
        icon = "📁" if entry.is_dir else "📄"
        name = truncate_filename(printable_name(entry.name), name_width)
        padding = " " * max(0, name_width - cell_len(name))
        styled_name = click.style(name, fg="blue", bold=True) if entry.is_dir else click.style(name, fg="white")
        size_str = click.style(f"{format_size(entry.size):>{SIZE_WIDTH}}", fg="cyan")

        line = f"{icon} {styled_name}{padding} {size_str}"
        if show_chart:
            cells = bar_length(entry.size, max_size)
            bar = click.style("█" * cells, fg="blue" if entry.is_dir else "green")
            line += f" [{bar}{' ' * (BAR_WIDTH - cells)}]"
        click.echo(line)

    click.echo(rule)
    click.echo(
        f"{click.style('Total:', fg='green', bold=True)} "
        f"{click.style(str(len(report.entries)), fg='yellow', bold=True)} items"
    )


def _print_header(report: Report) -> None:
    click.echo(f"{click.style('Directory:', fg='green', bold=True)} {click.style(printable_name(report.path), fg='yellow')}")
    click.echo(
        f"{click.style('Total size:', fg='green', bold=True)} "
        f"{click.style(format_size(report.total_size), fg='cyan', bold=True)}"
    )
