"""Tests for Config and LoggingConfig."""

import logging

import pytest

from signature_pad.config import Config
from signature_pad.utils.logging_config import LoggingConfig


@pytest.mark.parametrize("value, expected", [
    ("", None),
    ("auto", None),
    ("QT", "qt"),
    (" software ", "software"),
    ("metal", None),
])
def test_render_backend_override(monkeypatch, value, expected):
    monkeypatch.setenv(Config.RENDER_BACKEND_ENV, value)
    assert Config.get_render_backend_override() == expected


def test_log_dir_is_under_user_data_dir():
    assert Config.get_log_dir().parent == Config.get_user_data_dir()


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(LoggingConfig, "_initialized", False)
    monkeypatch.setattr(LoggingConfig, "_log_file_path", None)
    monkeypatch.setattr(LoggingConfig, "_console_handler", None)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_writes_file(tmp_path, fresh_logging):
    LoggingConfig.setup_logging(tmp_path / "logs")
    LoggingConfig.get_logger("signature_pad.test").debug("debug line")

    log_path = LoggingConfig.get_log_file_path()
    assert log_path == tmp_path / "logs" / "signature_pad.log"
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "debug line" in log_path.read_text(encoding='utf-8')


def test_setup_logging_is_idempotent(tmp_path, fresh_logging):
    before = len(logging.getLogger().handlers)
    LoggingConfig.setup_logging(tmp_path)
    LoggingConfig.setup_logging(tmp_path)
    assert len(logging.getLogger().handlers) == before + 2


def test_console_level_is_applied(tmp_path, fresh_logging):
    assert LoggingConfig.get_console_level() is None
    LoggingConfig.setup_logging(tmp_path, console_level=logging.DEBUG)
    assert LoggingConfig.get_console_level() == logging.DEBUG


@pytest.mark.parametrize("argv, expected", [
    ([], logging.INFO),
    (["--debug"], logging.DEBUG),
    (["--other"], logging.INFO),
])
def test_main_console_level_from_arguments(argv, expected):
    from signature_pad.main import console_log_level
    assert console_log_level(argv) == expected
