"""Command-line interface for McCabe Insight"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import __version__
from .api import all_records, run, run_paths
from .config import load_config
from .exceptions import McCabeInsightError, ParseError
from .formatters import FORMATTERS, get_formatter
from .logging_config import setup_logging

app = typer.Typer(
    name="mccabe-insight",
    help="McCabe Insight - cyclomatic complexity for C and C++ functions",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


@app.command()
def analyze(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Source files to analyze (reads standard input when omitted)",
        exists=False,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file, truncated at the start of the run (default: output.cy)",
        dir_okay=False,
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Source language: c (default) or cpp",
    ),
    fmt: str = typer.Option(
        "quiet",
        "--format",
        "-f",
        help="Stdout format: quiet (default), text, json, csv, rich",
    ),
    skip_declarations: bool = typer.Option(
        False,
        "--skip-declarations",
        help="Do not report prototypes (functions declared without a body)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Treat any syntax error as a parse failure",
    ),
    fail_above: Optional[int] = typer.Option(
        None,
        "--fail-above",
        help="Exit 1 if any function's complexity exceeds this value (for CI gating)",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of parallel workers for multiple files (default: auto-detect)",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records (with source line) to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Compute McCabe cyclomatic complexity for every function in a source unit.

    Writes one [bold]<line> <name> <complexity>[/bold] line per function to the
    output file, in the order functions appear.

    [bold cyan]Examples:[/bold cyan]

      mccabe-insight < program.c

      mccabe-insight src/*.c -o complexity.txt

      mccabe-insight main.cpp --language cpp --format rich

      mccabe-insight src/*.c --fail-above 10 --format text
    """
    if version:
        console.print(
            f"[bold cyan]McCabe Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    if fmt not in FORMATTERS:
        console.print(f"[red]Error:[/red] --format must be one of: {', '.join(sorted(FORMATTERS))}")
        raise typer.Exit(1)

    log_path = str(log_file) if log_file is not None else None
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_path)

    try:
        settings = load_config(
            config_file=config,
            language=language,
            output_path=str(output) if output is not None else None,
            report_declarations=False if skip_declarations else None,
            strict_syntax=True if strict else None,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )
        # config files and MCCABE_VERBOSITY may change the level
        logger = setup_logging(verbosity=settings.verbosity, log_file=log_path)
        logger.debug(f"Loaded settings: {settings}")

        failed = False
        if paths:
            results = run_paths(paths, settings)
            records = all_records(results)
            failed = any(not r.ok for r in results)
            for result in results:
                if result.error is not None:
                    console.print(f"[red]Error:[/red] {result.error}")
        else:
            source = sys.stdin.buffer.read()
            records = run(source, settings)

        get_formatter(fmt).render(records)

        if failed:
            raise typer.Exit(1)

        # --fail-above CI gating
        if fail_above is not None and records:
            worst = max(records, key=lambda r: r.complexity)
            if worst.complexity > fail_above:
                console.print(
                    f"[red]FAIL:[/red] {worst.name or '<anonymous>'} (line {worst.line}) has "
                    f"complexity {worst.complexity}, above {fail_above}"
                )
                raise typer.Exit(1)

    except ParseError as e:
        logger.debug(f"Parse failure: {e.reason}")
        console.print(f"[red]Parse error:[/red] {e}")
        raise typer.Exit(1)

    except McCabeInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
