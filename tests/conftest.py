"""Shared test fixtures for complexity-analyzer tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the sample C sources."""
    return FIXTURES


@pytest.fixture
def c_file(tmp_path):
    """Factory writing C source text to a temporary file."""

    def _write(content: str, name: str = "sample.c") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and COMPLEXITY_* vars out of a test."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in (
        "COMPLEXITY_MAX_FUNCTIONS",
        "COMPLEXITY_MAX_LINE_LENGTH",
        "COMPLEXITY_ENCODING",
        "COMPLEXITY_OUTPUT_FORMAT",
        "COMPLEXITY_VERBOSITY",
        "COMPLEXITY_LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    return work
