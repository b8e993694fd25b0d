#!/usr/bin/env python3
"""
Example: Basic usage of complexity-analyzer as a Python library
"""

from complexity_analyzer import AnalysisConfig, analyze_file, estimate_complexity

# Scan one file with a larger function table
analysis = analyze_file("/path/to/source.c", AnalysisConfig(max_functions=200))
estimate = estimate_complexity(analysis)

# Print per-function details
for fn in analysis.functions:
    marker = " (recursive)" if fn.has_recursion else ""
    print(f"{fn.name}{marker}: loop depth {fn.loop_depth}")

print()
for verdict in estimate.time:
    print(f"time:  {verdict.notation} ({verdict.reason})")
print(f"space: {estimate.space.notation} ({estimate.space.reason})")
