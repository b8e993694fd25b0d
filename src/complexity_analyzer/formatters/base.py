"""Base formatter interface for complexity-analyzer output rendering."""

from abc import ABC, abstractmethod

from ..estimator import ComplexityEstimate
from ..models import CodeAnalysis


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, analysis: CodeAnalysis, estimate: ComplexityEstimate) -> str:
        """Return formatted string representation of the report."""
