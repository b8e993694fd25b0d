"""Exception hierarchy for complexity-analyzer."""

from .analysis import (
    AnalysisError,
    CapacityExceeded,
    InputUnavailable,
)
from .base import ComplexityAnalyzerError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    UsageError,
)

__all__ = [
    "ComplexityAnalyzerError",
    "AnalysisError",
    "InputUnavailable",
    "CapacityExceeded",
    "UsageError",
    "ConfigurationError",
    "InvalidConfigError",
]
