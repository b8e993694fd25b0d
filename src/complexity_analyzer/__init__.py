"""
complexity-analyzer - heuristic time/space complexity estimates for C sources.

Scans one file line by line for function boundaries, loops, self-calls,
heap allocations and array declarations, then turns the counts into a
rough big-O verdict. No parse tree is built.
"""

__version__ = "0.1.0"

from .classifier import (
    is_array_declaration,
    is_function_start,
    is_loop_start,
    is_malloc_call,
    is_recursive_call,
)
from .config import AnalysisConfig, load_config
from .estimator import ComplexityEstimate, estimate_complexity
from .models import CodeAnalysis, FunctionInfo
from .scanner import LineScanner, analyze_file, analyze_lines

__all__ = [
    "analyze_file",  # Main entry point
    "analyze_lines",
    "estimate_complexity",
    "LineScanner",
    "CodeAnalysis",
    "FunctionInfo",
    "ComplexityEstimate",
    "AnalysisConfig",
    "load_config",
    "is_loop_start",
    "is_function_start",
    "is_recursive_call",
    "is_malloc_call",
    "is_array_declaration",
]
