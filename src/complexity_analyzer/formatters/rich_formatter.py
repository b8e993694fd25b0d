"""Rich terminal formatter for complexity-analyzer."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..estimator import ComplexityEstimate, SpaceComplexity, TimeComplexity
from ..models import CodeAnalysis
from .base import BaseFormatter

_TIME_COLORS = {
    TimeComplexity.EXPONENTIAL: "red bold",
    TimeComplexity.POLYNOMIAL: "red",
    TimeComplexity.QUADRATIC: "yellow",
    TimeComplexity.LINEAR: "green",
    TimeComplexity.CONSTANT: "green",
}

_SPACE_COLORS = {
    SpaceComplexity.LINEAR_OR_WORSE: "red",
    SpaceComplexity.LINEAR: "yellow",
    SpaceComplexity.CONSTANT: "green",
}


class RichFormatter(BaseFormatter):
    """Rich terminal output: summary table, function table, verdict panel."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> None:
        title = "Code Complexity Analysis"
        if analysis.source:
            title += f" [dim]{escape(analysis.source)}[/dim]"
        self.console.print()
        self.console.print(f"[bold cyan]{title}[/bold cyan]")
        self.console.print()
        self.console.print(self._summary_table(analysis))
        if analysis.functions:
            self.console.print(self._function_table(analysis))
        self.console.print(self._verdict_panel(estimate))

    def format(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> str:
        with self.console.capture() as capture:
            self.render(analysis, estimate)
        return capture.get()

    def _summary_table(self, analysis: CodeAnalysis) -> Table:
        table = Table(show_header=True, pad_edge=True)
        table.add_column("Metric", min_width=28)
        table.add_column("Count", justify="right")
        for label, value in [
            ("Total functions", analysis.total_functions),
            ("Total loops", analysis.total_loops),
            ("Maximum nested loops", analysis.max_nested_loops),
            ("Recursive functions", analysis.recursive_functions),
            ("Memory allocations (malloc)", analysis.malloc_calls),
            ("Array declarations", analysis.array_declarations),
        ]:
            table.add_row(label, str(value))
        return table

    def _function_table(self, analysis: CodeAnalysis) -> Table:
        table = Table(title="Function Details", show_header=True, pad_edge=True)
        table.add_column("Function", min_width=20)
        table.add_column("Recursive")
        table.add_column("Max loop depth", justify="right")
        for fn in analysis.functions:
            recursive = "[red]yes[/red]" if fn.has_recursion else "[dim]no[/dim]"
            table.add_row(escape(f"{fn.name}()"), recursive, str(fn.loop_depth))
        return table

    def _verdict_panel(self, estimate: ComplexityEstimate) -> Panel:
        lines = ["[bold]Time:[/bold]"]
        for verdict in estimate.time:
            color = _TIME_COLORS[verdict.kind]
            lines.append(f"  [{color}]{verdict.notation}[/{color}] {verdict.kind.value}, {verdict.reason}")
        space = estimate.space
        color = _SPACE_COLORS[space.kind]
        lines.append("[bold]Space:[/bold]")
        lines.append(f"  [{color}]{space.notation}[/{color}] {space.reason}")
        return Panel("\n".join(lines), title="[bold cyan]Estimated Complexity[/bold cyan]", expand=False)
