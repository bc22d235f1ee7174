"""
Tests for the command line entry point.
"""

import logging
import os

import pytest

from tonality.constants import INSTRUMENTS_DIR_ENV
from tonality.server import build_parser, configure


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep instrument settings and log level from leaking between tests."""
    monkeypatch.delenv(INSTRUMENTS_DIR_ENV, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestArguments:
    """Tests for argument parsing."""

    def test_defaults(self):
        """stdio on port 8000 with the default instruments directory."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.instruments is None
        assert not args.debug

    def test_http(self):
        """http transport takes a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9000"])
        assert args.transport == "http"
        assert args.port == 9000

    def test_unknown_transport(self):
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])


class TestConfigure:
    """Tests for applying arguments before the server loads."""

    def test_instruments_directory(self, temp_dir):
        """--instruments is passed on to the server through the environment."""
        configure(build_parser().parse_args(["--instruments", str(temp_dir)]))
        assert os.environ[INSTRUMENTS_DIR_ENV] == str(temp_dir.resolve())

    def test_missing_instruments_directory(self, temp_dir, caplog):
        """A missing directory is allowed but logged."""
        missing = temp_dir / "missing"
        with caplog.at_level(logging.WARNING):
            configure(build_parser().parse_args(["--instruments", str(missing)]))
        assert os.environ[INSTRUMENTS_DIR_ENV] == str(missing.resolve())
        assert "does not exist" in caplog.text

    def test_no_instruments_option(self):
        """Without --instruments the environment is untouched."""
        configure(build_parser().parse_args([]))
        assert INSTRUMENTS_DIR_ENV not in os.environ

    def test_debug(self):
        """--debug lowers the root log level."""
        configure(build_parser().parse_args(["--debug"]))
        assert logging.getLogger().level == logging.DEBUG
