"""Utility functions for terminal output."""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from ..client.models import Verdict

console = Console()


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_duration(nanoseconds: int) -> str:
    """Format a duration with a unit fitting its magnitude."""
    if nanoseconds < 1_000:
        return f"{nanoseconds}ns"
    if nanoseconds < 1_000_000:
        return f"{nanoseconds / 1_000:.3f}µs"
    if nanoseconds < 1_000_000_000:
        return f"{nanoseconds / 1_000_000:.3f}ms"
    return f"{nanoseconds / 1_000_000_000:.3f}s"


def _print_plain(text: str, style: Optional[str] = None) -> None:
    # Program text may contain [brackets], never read it as markup
    console.print(text, style=style, markup=False, highlight=False)


def print_verdict(verdict: Verdict) -> None:
    """Print a test verdict with line-level coloring."""
    if verdict.ok:
        console.print("[bold green]OK[/bold green]")
        if verdict.timings is not None:
            table = create_table("Average Executing Time", ["Test", "Time"])
            for number, elapsed in verdict.timings.items():
                table.add_row(f"#{number}", format_duration(elapsed))
            console.print(table)
        return

    console.print(f"[bold red]Wrong answer at test #{verdict.test_number}[/bold red]")

    console.print("[bold]Input:[/bold]")
    _print_plain(verdict.input)
    console.print()

    console.print("[bold]Output:[/bold]")
    for idx, line in enumerate(verdict.output.split("\n")):
        matched = idx < len(verdict.lines_mask) and verdict.lines_mask[idx]
        _print_plain(line, "bold green" if matched else "bold red")
    console.print()

    console.print("[bold]Answer:[/bold]")
    _print_plain(verdict.answer)


@contextmanager
def progress_bar(total: int) -> Iterator[Optional[Callable[[], None]]]:
    """
    Show a progress bar for total test executions.
    Yields a callback advancing the bar, or None when there is
    nothing worth showing.
    """
    if total <= 1:
        yield None
        return

    progress = Progress(
        TextColumn("[cyan]Testing[/cyan]"),
        BarColumn(bar_width=50),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )
    with progress:
        task = progress.add_task("tests", total=total)
        yield lambda: progress.advance(task)
