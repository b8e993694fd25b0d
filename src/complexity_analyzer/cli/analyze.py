"""Main analysis command: scan one file, estimate, render."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..estimator import estimate_complexity
from ..exceptions import ComplexityAnalyzerError, UsageError
from ..formatters import JsonFormatter, get_formatter
from ..logging_config import setup_logging
from ..scanner import analyze_file
from . import app
from ._common import USAGE, console, resolve_config


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Path to the source file to analyze (exactly one)",
        show_default=False,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (default), json, csv, rich",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the report as JSON to this file",
        dir_okay=False,
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
    max_functions: Optional[int] = typer.Option(
        None,
        "--max-functions",
        help="Capacity of the function table (default: 50)",
        min=1,
    ),
    max_line_length: Optional[int] = typer.Option(
        None,
        "--max-line-length",
        help="Read buffer size; longer lines are split into records (default: 256)",
        min=2,
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
        help="Append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Estimate the time and space complexity of a C source file.

    The file is scanned line by line for functions, loops, self-calls,
    malloc calls and array declarations. Results are approximate.

    [bold cyan]Examples:[/bold cyan]

      complexity-analyzer sort.c

      complexity-analyzer sort.c --format json | jq .summary

      complexity-analyzer sort.c --format rich --output report.json
    """
    if version:
        console.print(
            f"[bold cyan]complexity-analyzer[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        if not paths or len(paths) != 1:
            raise UsageError(USAGE, len(paths or []))

        settings = resolve_config(
            config=config,
            fmt=fmt,
            max_functions=max_functions,
            max_line_length=max_line_length,
            verbose=verbose,
            quiet=quiet,
            log_file=log_file,
        )
        logger = setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=settings.log_file,
        )
        logger.debug(f"Loaded settings: {settings}")

        analysis = analyze_file(paths[0], settings)
        estimate = estimate_complexity(analysis)

        get_formatter(settings.output_format).render(analysis, estimate)

        if output is not None:
            try:
                output.write_text(JsonFormatter().format(analysis, estimate) + "\n", encoding="utf-8")
            except OSError as e:
                raise ComplexityAnalyzerError(
                    f"Cannot write output file: {output}", details={"reason": str(e)}
                )
            logger.info(f"Report written to {output}")

    except UsageError as e:
        console.print(e.usage, markup=False, highlight=False)
        raise typer.Exit(1)

    except ComplexityAnalyzerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
