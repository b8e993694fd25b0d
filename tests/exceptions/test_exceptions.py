"""Tests for the exception hierarchy."""

from pathlib import Path

from complexity_analyzer.exceptions import (
    AnalysisError,
    CapacityExceeded,
    ComplexityAnalyzerError,
    ConfigurationError,
    InputUnavailable,
    InvalidConfigError,
    UsageError,
)


class TestHierarchy:
    """Test base classes."""

    def test_analysis_errors(self):
        assert issubclass(InputUnavailable, AnalysisError)
        assert issubclass(CapacityExceeded, AnalysisError)
        assert issubclass(AnalysisError, ComplexityAnalyzerError)

    def test_configuration_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(ConfigurationError, ComplexityAnalyzerError)
        assert issubclass(UsageError, ComplexityAnalyzerError)

    def test_distinct_failures(self):
        """Unreadable input and overflow are not the same error."""
        assert not issubclass(InputUnavailable, CapacityExceeded)
        assert not issubclass(CapacityExceeded, InputUnavailable)


class TestMessages:
    """Test message and details rendering."""

    def test_plain_message(self):
        assert str(ComplexityAnalyzerError("boom")) == "boom"

    def test_input_unavailable(self):
        err = InputUnavailable(Path("a.c"), "No such file or directory")
        assert str(err) == (
            "Cannot open file: a.c (filepath=a.c, reason=No such file or directory)"
        )
        assert err.reason == "No such file or directory"

    def test_capacity_exceeded(self):
        err = CapacityExceeded(50, "extra")
        assert err.details == {"capacity": "50", "function": "extra"}
        assert err.message == "Too many functions: capacity of 50 exceeded"

    def test_usage_error(self):
        err = UsageError("Usage: tool <file>", 2)
        assert err.usage == "Usage: tool <file>"
        assert err.received == 2

    def test_invalid_config(self):
        err = InvalidConfigError("max_functions", 0, "must be at least 1")
        assert "Invalid configuration for max_functions: 0" in str(err)
