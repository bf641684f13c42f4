"""Shared fixtures and markers for padthai tests."""

import io
import sys

import pytest

from padthai.api.cli import main


def pytest_configure(config):
    config.addinivalue_line("markers", "cli: exercises the command-line entry point")


@pytest.fixture
def run_cli(monkeypatch, capsysbinary):
    """Run the CLI with the given stdin bytes; return (status, stdout, stderr)."""
    def _run(argv, stdin=b""):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(stdin)))
        status = main(argv)
        out, err = capsysbinary.readouterr()
        return status, out, err.decode("utf-8")
    return _run
