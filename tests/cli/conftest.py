"""Pytest configuration and fixtures for CLI tests."""

import json

import pytest
from click.testing import CliRunner

from bibcite.cli.main import cli


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of CLI tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner():
    """CLI runner that invokes the bibcite command group."""

    class Runner:
        def __init__(self):
            self.runner = CliRunner()

        def invoke(self, args, **kwargs):
            return self.runner.invoke(cli, args, catch_exceptions=False, **kwargs)

    return Runner()


@pytest.fixture
def entries_file(tmp_path, sample_entries):
    """CSL-JSON file with the sample entries."""
    path = tmp_path / "refs.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """Config file selecting BibTeX output."""
    path = tmp_path / "bibcite-test.yaml"
    path.write_text("output:\n  style: bibtex\n", encoding="utf-8")
    return path
