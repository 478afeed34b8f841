"""Command-line interface for acf."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .client import CodeforcesClient
from .config import Config
from .errors import AcfError, CompileError
from .runner import SolutionRunner
from .utils import copy_file_to_clipboard, print_verdict, progress_bar


console = Console()
err_console = Console(stderr=True)


def fail(error: AcfError):
    """Report a command error and exit."""
    err_console.print(f"[bold red]{escape(str(error))}[/bold red]", highlight=False)
    if isinstance(error, CompileError) and error.diagnostics:
        err_console.print(error.diagnostics, markup=False, highlight=False)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context):
    """acf - download Codeforces samples and test solutions locally."""
    ctx.obj = Config.load()


@cli.command()
@click.argument("contest_id")
def contest(contest_id: str):
    """Download sample tests of every problem in a contest."""
    client = CodeforcesClient()

    console.print(f"[cyan]Fetching contest {escape(contest_id)}...[/cyan]")
    try:
        client.load_contest(contest_id)
    except AcfError as e:
        fail(e)

    console.print(f"[bold green]Contest {escape(contest_id)} was loaded.\nGood luck![/bold green]")


@cli.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "-b",
    "--bench",
    "bench_count",
    type=click.IntRange(min=1),
    is_flag=False,
    flag_value=1,
    default=None,
    help="Benchmark mode: run every test COUNT times (default: 1) and show average time",
)
@click.option(
    "-t",
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Time limit per test run in seconds",
)
@click.pass_obj
def test(config: Config, file: Path, bench_count: Optional[int], timeout: Optional[float]):
    """Compile a solution and check it against local samples."""
    runner = SolutionRunner(config, timeout=timeout)

    try:
        total = len(runner.list_tests()) * (bench_count or 1)
        with progress_bar(total) as advance:
            verdict = runner.run(file, bench_count=bench_count, on_progress=advance)
    except AcfError as e:
        fail(e)

    print_verdict(verdict)
    if not verdict.ok:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(path_type=Path))
def copy(file: Path):
    """Copy a source file to the clipboard."""
    try:
        copy_file_to_clipboard(file)
    except AcfError as e:
        fail(e)

    console.print(f"[bold green]File {escape(str(file))} was copied to clipboard[/bold green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
