"""CLI entry point: registers the analyze command."""

import typer

app = typer.Typer(
    name="complexity-analyzer",
    help="Heuristic time/space complexity estimates for a single C source file",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main  # noqa: F401, E402
