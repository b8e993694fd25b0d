"""Rule-based complexity estimator.

Maps the counters of a finished scan to qualitative time and space
verdicts. Recursion is read as exponential blow-up without looking at the
shape of the recursion, and loop nesting depth stands in for the polynomial
degree. Both time rules fire independently, so a recursive file with loops
gets two time verdicts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import CodeAnalysis


class TimeComplexity(Enum):
    EXPONENTIAL = "exponential"
    POLYNOMIAL = "polynomial"
    QUADRATIC = "quadratic"
    LINEAR = "linear"
    CONSTANT = "constant"


class SpaceComplexity(Enum):
    LINEAR_OR_WORSE = "linear_or_worse"
    LINEAR = "linear"
    CONSTANT = "constant"


@dataclass(frozen=True)
class TimeVerdict:
    """One time-complexity conclusion.

    Attributes:
        kind: Complexity class
        notation: Big-O notation, e.g. ``O(n^3)``
        reason: What in the scan triggered the verdict
        degree: Polynomial degree for loop verdicts (0 for constant), None for recursion
    """

    kind: TimeComplexity
    notation: str
    reason: str
    degree: int | None = None


@dataclass(frozen=True)
class SpaceVerdict:
    kind: SpaceComplexity
    notation: str
    reason: str


@dataclass(frozen=True)
class ComplexityEstimate:
    time: tuple[TimeVerdict, ...]
    space: SpaceVerdict


def estimate_time(analysis: CodeAnalysis) -> tuple[TimeVerdict, ...]:
    verdicts = []

    if analysis.has_recursion:
        verdicts.append(
            TimeVerdict(TimeComplexity.EXPONENTIAL, "O(2^n)", "recursion")
        )

    depth = analysis.max_nested_loops
    if depth >= 3:
        verdicts.append(
            TimeVerdict(
                TimeComplexity.POLYNOMIAL, f"O(n^{depth})", f"{depth} nested loops", depth
            )
        )
    elif depth == 2:
        verdicts.append(TimeVerdict(TimeComplexity.QUADRATIC, "O(n^2)", "nested loops", 2))
    elif analysis.total_loops > 0:
        verdicts.append(TimeVerdict(TimeComplexity.LINEAR, "O(n)", "loops", 1))
    else:
        verdicts.append(TimeVerdict(TimeComplexity.CONSTANT, "O(1)", "no loops found", 0))

    return tuple(verdicts)


def estimate_space(analysis: CodeAnalysis) -> SpaceVerdict:
    if analysis.has_allocations:
        if analysis.has_recursion:
            return SpaceVerdict(
                SpaceComplexity.LINEAR_OR_WORSE,
                "O(n) or worse",
                "dynamic allocations and/or recursion",
            )
        return SpaceVerdict(SpaceComplexity.LINEAR, "O(n)", "dynamic allocations detected")
    return SpaceVerdict(
        SpaceComplexity.CONSTANT, "O(1)", "no significant dynamic allocations"
    )


def estimate_complexity(analysis: CodeAnalysis) -> ComplexityEstimate:
    """Derive time and space verdicts from a finished scan."""
    return ComplexityEstimate(time=estimate_time(analysis), space=estimate_space(analysis))
