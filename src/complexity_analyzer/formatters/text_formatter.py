"""Plain text report, the tool's default output."""

from typing import List

from ..estimator import (
    ComplexityEstimate,
    SpaceComplexity,
    SpaceVerdict,
    TimeComplexity,
    TimeVerdict,
)
from ..models import CodeAnalysis
from .base import BaseFormatter

REPORT_TITLE = "=== Code Complexity Analysis Report ==="


def time_verdict_line(verdict: TimeVerdict) -> str:
    if verdict.kind is TimeComplexity.EXPONENTIAL:
        return f"- Exponential ({verdict.notation}) or worse detected due to recursion"
    if verdict.kind is TimeComplexity.POLYNOMIAL:
        return (
            f"- Polynomial ({verdict.notation}) detected due to "
            f"{verdict.degree} nested loops"
        )
    if verdict.kind is TimeComplexity.QUADRATIC:
        return f"- Quadratic ({verdict.notation}) detected due to nested loops"
    if verdict.kind is TimeComplexity.LINEAR:
        return f"- Linear ({verdict.notation}) detected due to loops"
    return f"- Constant ({verdict.notation}) - no loops found"


def space_verdict_line(verdict: SpaceVerdict) -> str:
    if verdict.kind is SpaceComplexity.LINEAR_OR_WORSE:
        return f"- {verdict.notation} (dynamic allocations and/or recursion)"
    if verdict.kind is SpaceComplexity.LINEAR:
        return f"- {verdict.notation} (dynamic allocations detected)"
    return f"- {verdict.notation} (no significant dynamic allocations)"


class TextFormatter(BaseFormatter):
    """Render the fixed plain text report."""

    def render(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> None:
        print(self.format(analysis, estimate), end="")

    def format(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> str:
        lines: List[str] = [
            "",
            REPORT_TITLE,
            "",
            f"Total functions: {analysis.total_functions}",
            f"Total loops: {analysis.total_loops}",
            f"Maximum nested loops: {analysis.max_nested_loops}",
            f"Recursive functions: {analysis.recursive_functions}",
            f"Memory allocations (malloc): {analysis.malloc_calls}",
            f"Array declarations: {analysis.array_declarations}",
            "",
            "Function Details:",
        ]
        for fn in analysis.functions:
            marker = "Recursive, " if fn.has_recursion else ""
            lines.append(f"  {fn.name}(): {marker}Max loop depth: {fn.loop_depth}")

        lines += ["", "Estimated Time Complexity:"]
        lines += [time_verdict_line(v) for v in estimate.time]
        lines += ["", "Estimated Space Complexity:", space_verdict_line(estimate.space)]

        return "\n".join(lines) + "\n"
