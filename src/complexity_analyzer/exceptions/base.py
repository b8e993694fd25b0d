"""Root of the complexity-analyzer error hierarchy.

Errors carry a short message plus a ``details`` mapping (the offending file
path, the function table capacity, a config key). The CLI exits 1 on
any of them, printing ``Error: <str(exc)>`` or, for ``UsageError``, the
usage line.
"""

from typing import Dict, Optional


class ComplexityAnalyzerError(Exception):
    """An analysis run that cannot produce a report."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"
