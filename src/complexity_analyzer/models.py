"""Data models for complexity-analyzer"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .config import DEFAULT_MAX_FUNCTIONS
from .exceptions import CapacityExceeded


@dataclass
class FunctionInfo:
    """Observations for one detected function.

    Attributes:
        name: Identifier captured on the function-start line
        is_recursive: True once a self-call has been found (set at most once)
        loop_depth: Deepest loop nesting seen inside the body
        has_recursion: Mirror of ``is_recursive`` used by the reports
    """

    name: str
    is_recursive: bool = False
    loop_depth: int = 0
    has_recursion: bool = False


@dataclass
class CodeAnalysis:
    """Aggregate statistics of one scan.

    Counters only grow while a scan runs. ``functions`` is bounded by
    ``capacity``; use ``add_function`` to append so the bound is enforced.
    """

    total_loops: int = 0
    max_nested_loops: int = 0
    recursive_functions: int = 0
    total_functions: int = 0
    malloc_calls: int = 0
    array_declarations: int = 0
    functions: list[FunctionInfo] = field(default_factory=list)
    capacity: int = DEFAULT_MAX_FUNCTIONS
    source: str = ""

    def add_function(self, name: str) -> FunctionInfo:
        """Record a newly detected function and return its record.

        Raises:
            CapacityExceeded: If the table already holds ``capacity`` entries
        """
        if len(self.functions) >= self.capacity:
            raise CapacityExceeded(self.capacity, name)
        info = FunctionInfo(name=name)
        self.functions.append(info)
        self.total_functions += 1
        return info

    @property
    def current_function(self) -> FunctionInfo | None:
        """The most recently detected function, if any."""
        return self.functions[-1] if self.functions else None

    @property
    def has_recursion(self) -> bool:
        return self.recursive_functions > 0

    @property
    def has_allocations(self) -> bool:
        """True when heap allocations or array declarations were seen."""
        return self.malloc_calls > 0 or self.array_declarations > 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
