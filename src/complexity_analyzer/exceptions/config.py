"""Invocation and configuration exceptions."""

from typing import Any

from .base import ComplexityAnalyzerError


class UsageError(ComplexityAnalyzerError):
    """Raised when the tool is invoked with the wrong arguments."""

    def __init__(self, usage: str, received: int):
        super().__init__(usage, details={"arguments": str(received)})
        self.usage = usage
        self.received = received


class ConfigurationError(ComplexityAnalyzerError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
