"""JSON formatter for complexity-analyzer."""

import json
from typing import Any, Dict

from ..estimator import ComplexityEstimate
from ..models import CodeAnalysis
from .base import BaseFormatter


def report_dict(analysis: CodeAnalysis, estimate: ComplexityEstimate) -> Dict[str, Any]:
    """Build the machine-readable report structure."""
    return {
        "source": analysis.source,
        "summary": {
            "total_functions": analysis.total_functions,
            "total_loops": analysis.total_loops,
            "max_nested_loops": analysis.max_nested_loops,
            "recursive_functions": analysis.recursive_functions,
            "malloc_calls": analysis.malloc_calls,
            "array_declarations": analysis.array_declarations,
        },
        "functions": [
            {
                "name": fn.name,
                "is_recursive": fn.is_recursive,
                "has_recursion": fn.has_recursion,
                "loop_depth": fn.loop_depth,
            }
            for fn in analysis.functions
        ],
        "complexity": {
            "time": [
                {
                    "kind": v.kind.value,
                    "notation": v.notation,
                    "reason": v.reason,
                    "degree": v.degree,
                }
                for v in estimate.time
            ],
            "space": {
                "kind": estimate.space.kind.value,
                "notation": estimate.space.notation,
                "reason": estimate.space.reason,
            },
        },
    }


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> None:
        print(self.format(analysis, estimate))

    def format(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> str:
        return json.dumps(report_dict(analysis, estimate), indent=2)
