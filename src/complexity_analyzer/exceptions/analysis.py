"""Analysis-related exceptions: input access, scan capacity."""

from pathlib import Path
from typing import Union

from .base import ComplexityAnalyzerError


class AnalysisError(ComplexityAnalyzerError):
    """Base class for analysis-related errors."""
    pass


class InputUnavailable(AnalysisError):
    """Raised when the input file cannot be opened for reading."""

    def __init__(self, filepath: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot open file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class CapacityExceeded(AnalysisError):
    """Raised when more functions are detected than the analysis can hold."""

    def __init__(self, capacity: int, function_name: str):
        super().__init__(
            f"Too many functions: capacity of {capacity} exceeded",
            details={"capacity": str(capacity), "function": function_name},
        )
        self.capacity = capacity
        self.function_name = function_name
