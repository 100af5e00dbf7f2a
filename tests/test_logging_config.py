"""Tests for logging setup driven by the ingest config."""

import logging

import pytest

from src.ingest.base_fetcher import load_ingest_config
from src.logging_config import DEFAULT_LOG_FILE, configure_logging, logging_settings, parse_level


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers; original handlers and level restored afterwards."""
    root = logging.getLogger()
    original_level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in root.handlers:
        handler.close()
    root.setLevel(original_level)


class TestParseLevel:
    def test_names_and_numbers(self):
        assert parse_level("DEBUG") == logging.DEBUG
        assert parse_level("warning") == logging.WARNING
        assert parse_level(logging.ERROR) == logging.ERROR

    def test_unknown_falls_back_to_info(self):
        assert parse_level("LOUD") == logging.INFO
        assert parse_level(None) == logging.INFO


class TestLoggingSettings:
    def test_defaults_from_config(self, tmp_path):
        settings = logging_settings(load_ingest_config(str(tmp_path / "missing.yaml")))
        assert settings == {"level": logging.INFO, "log_file": DEFAULT_LOG_FILE}

    def test_yaml_section_applied(self, tmp_path):
        path = tmp_path / "ingest.yaml"
        path.write_text("logging:\n  level: debug\n  file: null\n")
        settings = logging_settings(load_ingest_config(str(path)))
        assert settings == {"level": logging.DEBUG, "log_file": None}


class TestConfigureLogging:
    def test_file_handler_created(self, bare_root, tmp_path):
        bare_root.handlers.clear()  # drop pytest's call-phase capture handlers
        log_file = tmp_path / "out" / "credits.log"
        configure_logging(level="DEBUG", log_file=str(log_file))

        assert bare_root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)
        assert log_file.parent.is_dir()

    def test_console_only_without_file(self, bare_root):
        bare_root.handlers.clear()  # drop pytest's call-phase capture handlers
        configure_logging(log_file=None)
        assert len(bare_root.handlers) == 1
        assert not isinstance(bare_root.handlers[0], logging.FileHandler)

    def test_second_call_is_noop(self, bare_root):
        bare_root.handlers.clear()  # drop pytest's call-phase capture handlers
        configure_logging(log_file=None)
        configure_logging(log_file=None)
        assert len(bare_root.handlers) == 1
