"""Tests for the analysis data model."""

import pytest

from complexity_analyzer.exceptions import CapacityExceeded
from complexity_analyzer.models import CodeAnalysis, FunctionInfo


class TestFunctionInfo:
    """Test FunctionInfo defaults."""

    def test_new_function_is_zeroed(self):
        info = FunctionInfo(name="f")
        assert not info.is_recursive
        assert not info.has_recursion
        assert info.loop_depth == 0


class TestCodeAnalysis:
    """Test the aggregate and its bounded function table."""

    def test_add_function(self):
        analysis = CodeAnalysis()
        info = analysis.add_function("main")
        assert info.name == "main"
        assert analysis.total_functions == 1
        assert analysis.current_function is info

    def test_current_function_empty(self):
        assert CodeAnalysis().current_function is None

    def test_capacity_enforced(self):
        analysis = CodeAnalysis(capacity=1)
        analysis.add_function("a")
        with pytest.raises(CapacityExceeded) as exc_info:
            analysis.add_function("b")
        assert "capacity of 1" in str(exc_info.value)
        assert analysis.total_functions == 1
        assert len(analysis.functions) == 1

    def test_flags(self):
        assert not CodeAnalysis().has_allocations
        assert CodeAnalysis(malloc_calls=1).has_allocations
        assert CodeAnalysis(array_declarations=1).has_allocations
        assert CodeAnalysis(recursive_functions=1).has_recursion

    def test_to_dict(self):
        analysis = CodeAnalysis(source="a.c")
        analysis.add_function("f").loop_depth = 2
        data = analysis.to_dict()
        assert data["total_functions"] == 1
        assert data["functions"] == [
            {"name": "f", "is_recursive": False, "loop_depth": 2, "has_recursion": False}
        ]
        assert data["source"] == "a.c"
