"""CSV formatter: one row per detected function."""

import csv
import io

from ..estimator import ComplexityEstimate
from ..models import CodeAnalysis
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render function details as CSV."""

    def render(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> None:
        print(self.format(analysis, estimate), end="")

    def format(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(["function", "recursive", "max_loop_depth"])
        for fn in analysis.functions:
            writer.writerow([fn.name, str(fn.has_recursion).lower(), fn.loop_depth])
        return output.getvalue()
