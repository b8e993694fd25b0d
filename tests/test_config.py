"""Tests for configuration loading."""

from pathlib import Path

import pytest

from complexity_analyzer.config import AnalysisConfig, load_config
from complexity_analyzer.exceptions import ComplexityAnalyzerError, InvalidConfigError

pytestmark = pytest.mark.usefixtures("isolated_config")


class TestAnalysisConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.max_functions == 50
        assert config.max_line_length == 256
        assert config.record_length == 255
        assert config.output_format == "text"
        assert config.verbosity == "normal"

    @pytest.mark.parametrize(
        "kwargs,key",
        [
            ({"max_functions": 0}, "max_functions"),
            ({"max_line_length": 1}, "max_line_length"),
            ({"encoding": ""}, "encoding"),
            ({"output_format": "xml"}, "output_format"),
            ({"verbosity": "loud"}, "verbosity"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        with pytest.raises(InvalidConfigError) as exc_info:
            AnalysisConfig(**kwargs)
        assert exc_info.value.key == key


class TestLoadConfig:
    """Test merging of config sources."""

    def test_defaults_without_sources(self):
        assert load_config() == AnalysisConfig()

    def test_overrides(self):
        config = load_config(max_functions=10, output_format="json")
        assert config.max_functions == 10
        assert config.output_format == "json"

    def test_none_overrides_are_ignored(self):
        assert load_config(max_functions=None).max_functions == 50

    def test_verbosity_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_explicit_toml_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('max_functions = 7\noutput_format = "csv"\n')
        config = load_config(config_file=path)
        assert config.max_functions == 7
        assert config.output_format == "csv"

    def test_toml_section(self, tmp_path):
        path = tmp_path / "shared.toml"
        path.write_text('[complexity-analyzer]\nmax_line_length = 512\n')
        assert load_config(config_file=path).max_line_length == 512

    def test_project_config_discovered(self, isolated_config):
        (isolated_config / "complexity-analyzer.toml").write_text("max_functions = 12\n")
        assert load_config().max_functions == 12

    def test_cli_override_beats_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("max_functions = 7\n")
        assert load_config(config_file=path, max_functions=9).max_functions == 9

    def test_missing_file(self, tmp_path):
        with pytest.raises(ComplexityAnalyzerError, match="Config file not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_functions = = 3\n")
        with pytest.raises(ComplexityAnalyzerError, match="Invalid config file"):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("colour = true\n")
        with pytest.raises(ComplexityAnalyzerError, match="Invalid configuration"):
            load_config(config_file=path)

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("COMPLEXITY_MAX_FUNCTIONS", "3")
        monkeypatch.setenv("COMPLEXITY_VERBOSITY", "quiet")
        monkeypatch.setenv("COMPLEXITY_LOG_FILE", "scan.log")
        config = load_config()
        assert config.max_functions == 3
        assert config.verbosity == "quiet"
        assert config.log_file == "scan.log"

    def test_environment_bad_int(self, monkeypatch):
        monkeypatch.setenv("COMPLEXITY_MAX_LINE_LENGTH", "wide")
        with pytest.raises(ComplexityAnalyzerError, match="COMPLEXITY_MAX_LINE_LENGTH"):
            load_config()

    def test_environment_invalid_value(self, monkeypatch):
        monkeypatch.setenv("COMPLEXITY_OUTPUT_FORMAT", "xml")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_config_file_path_type(self, tmp_path):
        """Paths are accepted as pathlib objects."""
        path = Path(tmp_path / "c.toml")
        path.write_text("")
        assert load_config(config_file=path) == AnalysisConfig()
