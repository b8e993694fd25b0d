"""Configuration loading and management for complexity-analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.complexity-analyzer.toml)
    3. Project config (./complexity-analyzer.toml)
    4. Explicit config file
    5. Environment variables (COMPLEXITY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(max_functions=100)
    >>> config.max_functions
    100
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ComplexityAnalyzerError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json", "csv", "rich"]

OUTPUT_FORMATS = ("text", "json", "csv", "rich")
VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

# Historical limits of the line scanner: a 256 byte read buffer and room
# for 50 function records.
DEFAULT_MAX_LINE_LENGTH = 256
DEFAULT_MAX_FUNCTIONS = 50

GLOBAL_CONFIG_NAME = ".complexity-analyzer.toml"
PROJECT_CONFIG_NAME = "complexity-analyzer.toml"
ENV_PREFIX = "COMPLEXITY_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a single-file analysis run.

    Attributes:
        Scanning:
            max_functions: Capacity of the per-function table. Detecting more
                functions than this fails the scan with CapacityExceeded.
            max_line_length: Size of the read buffer. A physical line longer
                than ``max_line_length - 1`` characters is split into several
                records, each classified on its own.
            encoding: Text encoding of the input. Undecodable bytes are
                replaced, never fatal.

        Output control:
            output_format: Report renderer (text, json, csv, rich)
            verbosity: Logging verbosity level
            log_file: Optional file that receives log records as well
    """

    # Scanning
    max_functions: int = DEFAULT_MAX_FUNCTIONS
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    encoding: str = "utf-8"

    # Output control
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_functions < 1:
            raise InvalidConfigError("max_functions", self.max_functions, "must be at least 1")
        # One character plus the terminator is the smallest useful buffer
        if self.max_line_length < 2:
            raise InvalidConfigError(
                "max_line_length", self.max_line_length, "must be at least 2"
            )
        if not self.encoding:
            raise InvalidConfigError("encoding", self.encoding, "must not be empty")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"must be one of: {', '.join(OUTPUT_FORMATS)}",
            )
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity",
                self.verbosity,
                f"must be one of: {', '.join(VERBOSITY_LEVELS)}",
            )

    @property
    def record_length(self) -> int:
        """Maximum number of characters classified as one line record."""
        return self.max_line_length - 1


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ComplexityAnalyzerError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except ComplexityAnalyzerError:
            raise
        except Exception as e:
            raise ComplexityAnalyzerError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ComplexityAnalyzerError:
            raise
        except Exception as e:
            raise ComplexityAnalyzerError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ComplexityAnalyzerError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ComplexityAnalyzerError:
            raise
        except Exception as e:
            raise ComplexityAnalyzerError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ComplexityAnalyzerError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMPLEXITY_* environment variables.

    Supported environment variables:
        COMPLEXITY_MAX_FUNCTIONS: int
        COMPLEXITY_MAX_LINE_LENGTH: int
        COMPLEXITY_ENCODING: str
        COMPLEXITY_OUTPUT_FORMAT: text/json/csv/rich
        COMPLEXITY_VERBOSITY: quiet/normal/verbose
        COMPLEXITY_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any COMPLEXITY_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ComplexityAnalyzerError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]; unwrap X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[complexity-analyzer]`` table is used when present, so the settings
    can live in a shared file; otherwise the top-level keys are taken.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ComplexityAnalyzerError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("complexity-analyzer")
    if isinstance(section, dict):
        return section
    return data
