"""Line scanner: the function/brace/loop tracking state machine.

The scanner walks the input top to bottom and keeps four pieces of state:
the current function name, whether it is inside a function body, the brace
balance since the function started, and the loop nesting depth. Every line
drives the classifier predicates and updates one ``CodeAnalysis``, which the
scanner owns for the lifetime of the scan.

Known heuristic limitations, kept as observable behavior:
    - A function whose ``{`` is on the line after its signature is entered
      and left on the signature line, since the brace balance is zero there.
    - Loop ends are inferred from any ``}`` on a line, so an ``if`` block
      closing inside a loop pops a loop level as well.
    - The line that closes a function is not inspected for loops or
      recursion; the function is left before those checks run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from . import classifier
from .config import AnalysisConfig
from .exceptions import InputUnavailable
from .logging_config import get_logger
from .models import CodeAnalysis

logger = get_logger(__name__)


@dataclass
class LineScanner:
    """Feed lines one at a time; read the result from ``analysis``."""

    analysis: CodeAnalysis = field(default_factory=CodeAnalysis)
    current_function: str = ""
    in_function: bool = False
    brace_count: int = 0
    loop_stack_depth: int = 0
    lines_seen: int = 0

    def feed(self, line: str) -> None:
        """Classify one line record and update the analysis."""
        self.lines_seen += 1
        trimmed = classifier.trim_line(line)
        if classifier.is_skippable(trimmed):
            return

        if not self.in_function and classifier.is_function_start(trimmed):
            self._enter_function(trimmed)

        if self.in_function:
            self._track_braces(trimmed)

        if self.in_function and classifier.is_loop_start(trimmed):
            self._open_loop()

        # Loop end is inferred from any closing brace on the line
        if self.in_function and "}" in trimmed and self.loop_stack_depth > 0:
            self.loop_stack_depth -= 1

        if self.in_function and classifier.is_recursive_call(trimmed, self.current_function):
            self._mark_recursive()

        if classifier.is_malloc_call(trimmed):
            self.analysis.malloc_calls += 1

        if classifier.is_array_declaration(trimmed):
            self.analysis.array_declarations += 1

    def feed_all(self, lines: Iterable[str]) -> CodeAnalysis:
        for line in lines:
            self.feed(line)
        return self.analysis

    def _enter_function(self, trimmed: str) -> None:
        name = classifier.extract_function_name(trimmed)
        self.analysis.add_function(name)
        self.current_function = name
        self.in_function = True
        self.brace_count = 0
        logger.debug("line %d: entering function %r", self.lines_seen, name)

    def _track_braces(self, trimmed: str) -> None:
        self.brace_count += trimmed.count("{") - trimmed.count("}")
        if self.brace_count == 0:
            logger.debug(
                "line %d: leaving function %r", self.lines_seen, self.current_function
            )
            self.in_function = False
            self.current_function = ""
            self.loop_stack_depth = 0

    def _open_loop(self) -> None:
        self.analysis.total_loops += 1
        self.loop_stack_depth += 1
        if self.loop_stack_depth > self.analysis.max_nested_loops:
            self.analysis.max_nested_loops = self.loop_stack_depth
        # in_function implies at least one recorded function
        function = self.analysis.current_function
        if self.loop_stack_depth > function.loop_depth:
            function.loop_depth = self.loop_stack_depth

    def _mark_recursive(self) -> None:
        function = self.analysis.current_function
        function.has_recursion = True
        if not function.is_recursive:
            function.is_recursive = True
            self.analysis.recursive_functions += 1
            logger.debug("line %d: %r calls itself", self.lines_seen, function.name)


def iter_line_records(stream: TextIO, config: AnalysisConfig) -> Iterator[str]:
    """Yield bounded line records from a text stream.

    A read buffer of ``config.max_line_length`` holds at most
    ``config.record_length`` characters, so longer physical lines come out
    as several records.
    """
    record_length = config.record_length
    for line in stream:
        if len(line) <= record_length:
            yield line
            continue
        for start in range(0, len(line), record_length):
            yield line[start:start + record_length]


def analyze_lines(
    lines: Iterable[str], config: Optional[AnalysisConfig] = None, source: str = ""
) -> CodeAnalysis:
    """Scan an iterable of lines and return a fresh CodeAnalysis.

    Raises:
        CapacityExceeded: If more than ``config.max_functions`` functions are found
    """
    config = config or AnalysisConfig()
    scanner = LineScanner(analysis=CodeAnalysis(capacity=config.max_functions, source=source))
    analysis = scanner.feed_all(lines)
    logger.debug(
        "scanned %d line records: %d functions, %d loops, max depth %d",
        scanner.lines_seen,
        analysis.total_functions,
        analysis.total_loops,
        analysis.max_nested_loops,
    )
    return analysis


def analyze_file(
    filepath: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> CodeAnalysis:
    """Scan one source file.

    Raises:
        InputUnavailable: If the file cannot be opened for reading
        CapacityExceeded: If more than ``config.max_functions`` functions are found
    """
    config = config or AnalysisConfig()
    path = Path(filepath)

    try:
        handle = open(path, "r", encoding=config.encoding, errors="replace", newline="")
    except OSError as e:
        raise InputUnavailable(path, e.strerror or str(e))
    except LookupError as e:
        raise InputUnavailable(path, f"unknown encoding: {e}")

    logger.debug("analyzing %s", path)
    with handle:
        return analyze_lines(
            iter_line_records(handle, config), config, source=str(path)
        )
