"""
Logging for complexity-analyzer.

stdout is reserved for the report, so every record goes to stderr through a
rich handler. At DEBUG (``--verbose``) the scanner traces its state machine
with line-numbered records: entering and leaving each function, the first
self-call found in a function, and a per-scan summary of the counters.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "complexity_analyzer"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route complexity_analyzer records to stderr and, optionally, a file.

    Args:
        verbose: Show the scanner's line-by-line DEBUG trace
        quiet: Only report errors (unreadable input, capacity overflow)
        log_file: Append records to this file as well, with timestamps

    Returns:
        Configured logger instance for complexity_analyzer
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``complexity_analyzer`` namespace.

    Args:
        name: Module name (e.g., 'complexity_analyzer.scanner').
              If None, returns the root complexity_analyzer logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
