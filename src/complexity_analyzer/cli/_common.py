"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()

USAGE = "Usage: complexity-analyzer <filename.c>"


def resolve_config(
    config: Optional[Path] = None,
    fmt: Optional[str] = None,
    max_functions: Optional[int] = None,
    max_line_length: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> AnalysisConfig:
    """Build the analysis config from CLI options."""
    overrides = {
        "output_format": fmt,
        "max_functions": max_functions,
        "max_line_length": max_line_length,
        "log_file": str(log_file) if log_file is not None else None,
    }
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
