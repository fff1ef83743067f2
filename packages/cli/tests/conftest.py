"""Pytest fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from local_details_common import configure_logging, get_settings


@pytest.fixture
def cli_runner():
    """Typer test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run every test in an empty directory with default settings."""
    for var in ("LOG_LEVEL", "LOG_FORMAT", "DETAILS_FILENAME", "GENRE_MODE", "EDITOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    configure_logging("WARNING", "console")
    yield tmp_path
    get_settings.cache_clear()
