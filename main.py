#!/usr/bin/env python3
"""
puzzlebench - CLI Entry Point

Usage:
    python main.py run --platform aoc --solution y2015d01p1 --test 1
    python main.py bench --platform aoc --solution y2015d01p1 --test 0 --iterations 100 --save
    python main.py list-solutions
"""

import sys
import logging
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.progress import Progress, BarColumn, MofNCompleteColumn, TextColumn, TimeElapsedColumn

from puzzlebench import __version__
from puzzlebench.config import Config
from puzzlebench.errors import HarnessError
from puzzlebench.platforms import EntryPointResolver, Platform, SolutionSpecifier, list_platforms
from puzzlebench.data.loader import InputLoader
from puzzlebench.benchmark.runner import BenchmarkSession
from puzzlebench.benchmark.persistence import ResultStore
from puzzlebench.benchmark.reporter import ReportFormatter
from puzzlebench.benchmark.utils import format_ms, format_us

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logging.getLogger('puzzlebench').setLevel(level)


def _specifier(platform: str, solution: str, test: int) -> SolutionSpecifier:
    return SolutionSpecifier(Platform.from_tag(platform), solution, test)


def _make_session(input_dir, results_dir) -> BenchmarkSession:
    return BenchmarkSession(
        resolver=EntryPointResolver(),
        loader=InputLoader(Path(input_dir) if input_dir else None),
        store=ResultStore(Path(results_dir) if results_dir else None),
    )


def _fail(error: HarnessError):
    console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False, soft_wrap=True)
    cause = error.__cause__
    if cause is not None:
        console.print(f"[red]Caused by: {cause.__class__.__name__}: {escape(str(cause))}[/red]",
                      highlight=False, soft_wrap=True)
    logger.debug("Harness error", exc_info=error)
    sys.exit(1)


platform_option = click.option(
    '--platform', '-p', default=Platform.ADVENT_OF_CODE.value, show_default=True,
    help=f"Platform tag ({', '.join(list_platforms())})",
)
solution_option = click.option('--solution', '-s', required=True, help='Solution name (e.g., y2015d01p1)')
test_option = click.option('--test', '-t', default=0, type=int, show_default=True,
                           help='Test input 1-9, or 0 for the real input')
input_dir_option = click.option('--input-dir', default=None, help='Input directory (default: from config)')


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output (INFO level)')
@click.option('--debug', is_flag=True, help='Enable debug output (DEBUG level)')
@click.pass_context
def cli(ctx, verbose, debug):
    """
    puzzlebench

    Run puzzle solutions and benchmark them with nanosecond timing.
    Benchmarks report statistics over all runs and over the last 80%
    of runs, after warm-up.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['debug'] = debug
    setup_logging(verbose, debug)


@cli.command()
@platform_option
@solution_option
@test_option
@input_dir_option
def run(platform, solution, test, input_dir):
    """
    Run a solution once with its output.

    Example:
        python main.py run -p aoc -s y2015d01p1 -t 1
    """
    try:
        specifier = _specifier(platform, solution, test)
        session = _make_session(input_dir, None)
        elapsed = session.run_once(specifier)
    except HarnessError as e:
        _fail(e)

    console.print(
        f"\n⏱️  {escape(str(specifier))}: [green]{format_ms(elapsed)} ms[/green] ({format_us(elapsed)} µs)",
        highlight=False,
        soft_wrap=True,
    )


@cli.command()
@platform_option
@solution_option
@test_option
@click.option('--iterations', '-n', default=Config.DEFAULT_ITERATIONS, type=int, show_default=True,
              help='Number of timed runs (at least 3)')
@click.option('--save/--no-save', default=False, help='Save raw runtimes to CSV')
@input_dir_option
@click.option('--results-dir', default=None, help='CSV output directory (default: from config)')
def bench(platform, solution, test, iterations, save, input_dir, results_dir):
    """
    Benchmark a solution over many runs.

    Example:
        python main.py bench -p aoc -s y2015d01p1 -t 0 -n 100 --save
    """
    console.print(f"\n[bold blue]Solution Benchmark[/bold blue]")
    console.print(f"Solution: [cyan]{escape(platform)}:{escape(solution)}[/cyan]")
    console.print(f"Input: [cyan]{'real' if test == 0 else f'test {test}'}[/cyan]")
    console.print(f"Iterations: [cyan]{iterations}[/cyan]")
    console.print("")

    try:
        specifier = _specifier(platform, solution, test)
        session = _make_session(input_dir, results_dir)

        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("{task.fields[last]}"),
            TimeElapsedColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Benchmarking...", total=iterations, last="")

            def on_sample(iteration, total, duration_ns):
                progress.update(task, completed=iteration, last=f"{format_ms(duration_ns)} ms")

            outcome = session.on_sample(on_sample).benchmark(specifier, iterations, persist=save)
    except HarnessError as e:
        _fail(e)

    console.print("")
    console.print(ReportFormatter().format_report(outcome.report),
                  markup=False, highlight=False, soft_wrap=True)

    if outcome.csv_path:
        console.print(f"\n📊 Runtimes saved: [green]{escape(str(outcome.csv_path))}[/green]")
    elif outcome.persistence_error:
        console.print(f"\n[yellow]⚠️  Runtimes not saved: {escape(str(outcome.persistence_error))}[/yellow]",
                      highlight=False, soft_wrap=True)


@cli.command('list-solutions')
@click.option('--platform', '-p', default=None, help='Only list this platform')
def list_solutions_cmd(platform):
    """List registered solutions."""
    try:
        selected = Platform.from_tag(platform) if platform else None
    except HarnessError as e:
        _fail(e)

    resolver = EntryPointResolver()
    keys = resolver.list_solutions(selected)

    console.print("\n[bold]Available Solutions:[/bold]\n")

    table = Table()
    table.add_column("Platform", style="cyan")
    table.add_column("Solution")

    for solution_platform, name in keys:
        table.add_row(resolver.handlers[solution_platform].display_name, name)

    console.print(table)
    console.print(f"\n{len(keys)} solution(s). Run one with: python main.py run -s <solution> -t <test>")


if __name__ == "__main__":
    cli()
