"""Rendering of validation reports as rich tables or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from refcheck.validator.models import Report


def reports_to_json(reports: Sequence[Report], indent: int = 2) -> str:
    """Serialize reports as a JSON array, one object per folder."""
    return json.dumps([r.model_dump(mode="json") for r in reports], indent=indent)


def _summary_table(report: Report) -> Table:
    table = Table(title=escape(report.folder_path), title_justify="left")
    table.add_column("Result", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total Files", str(report.total_files))
    table.add_row("Intact Files", f"[green]{report.intact_files}[/green]")
    table.add_row("Corrupted Files", _count(report.corrupted_files))
    table.add_row("Invalid Files", _count(report.invalid_files))
    table.add_row("Unreadable Files", _count(report.errored_files))
    return table


def _count(n: int) -> str:
    return f"[red]{n}[/red]" if n else "0"


def render_report(report: Report, console: Console) -> None:
    console.print()
    console.print(_summary_table(report))

    console.print("\n[bold]Corrupted Files:[/bold]")
    if report.corrupted_file_list:
        table = Table(show_lines=False)
        table.add_column("File Path", style="cyan", overflow="fold")
        table.add_column("Actual Hash", style="red", overflow="fold")
        for f in report.corrupted_file_list:
            table.add_row(escape(f.file_path), f.actual_hash)
        console.print(table)
    else:
        console.print("None")

    console.print("\n[bold]Invalid File Names:[/bold]")
    if report.invalid_file_list:
        table = Table()
        table.add_column("File Path", style="yellow", overflow="fold")
        for path in report.invalid_file_list:
            table.add_row(escape(path))
        console.print(table)
    else:
        console.print("None")

    if report.errored_file_list:
        console.print("\n[bold]Unreadable Files:[/bold]")
        table = Table()
        table.add_column("File Path", style="magenta", overflow="fold")
        table.add_column("Error", overflow="fold")
        for f in report.errored_file_list:
            table.add_row(escape(f.file_path), escape(f.error))
        console.print(table)


def render_reports(reports: Sequence[Report], console: Console | None = None) -> None:
    """Print one summary block per folder report."""
    console = console or Console()
    for report in reports:
        render_report(report, console)
        console.print("-" * 19)
