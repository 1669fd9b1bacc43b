"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from codehike_editor.core.observability.logging_config import (
    configure_from_cli,
    parse_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_unknown_or_empty(self):
        assert parse_level("loud") == logging.WARNING
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert logging.getLogger("werkzeug").level == logging.WARNING

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "editor.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("codehike_editor.test").debug("written to file")
        for h in root.handlers:
            h.flush()
        assert "written to file" in log_file.read_text()


class TestConfigureFromCli:
    def test_flags_win_over_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHE_LOG_LEVEL", "ERROR")
        configure_from_cli(verbose=True)
        assert logging.getLogger().level == logging.INFO

    def test_env_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHE_LOG_LEVEL", "ERROR")
        monkeypatch.delenv("CHE_LOG_FILE", raising=False)
        configure_from_cli()
        assert logging.getLogger().level == logging.ERROR

    def test_debug_keeps_third_party(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("CHE_LOG_FILE", raising=False)
        logging.getLogger("werkzeug").setLevel(logging.NOTSET)
        configure_from_cli(debug=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("werkzeug").level == logging.NOTSET
