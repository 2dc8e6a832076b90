"""
Tests for the logging configuration module.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from src.core.logging_config import (
    SafeRotatingFileHandler,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    setup_logging()

    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)


def test_setup_logging_debug_with_file(restore_root_logger, tmp_path):
    log_path = tmp_path / "logs" / "snapo.log"

    setup_logging(debug_mode=True, log_to_console=False, log_path=str(log_path))
    get_logger("src.test").debug("hello")

    assert restore_root_logger.level == logging.DEBUG
    assert isinstance(restore_root_logger.handlers[0], SafeRotatingFileHandler)
    restore_root_logger.handlers[0].flush()
    assert "hello" in log_path.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging()
    setup_logging()

    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_unwritable_file(restore_root_logger, capsys):
    with patch("src.core.logging_config.os.makedirs", side_effect=OSError("denied")):
        setup_logging(log_to_console=False, log_path="/nowhere/snapo.log")

    assert restore_root_logger.handlers == []
    assert "Could not set up file logging" in capsys.readouterr().err


def test_safe_rollover_ignores_windows_lock(tmp_path):
    handler = SafeRotatingFileHandler(str(tmp_path / "snapo.log"))
    try:
        with patch.object(
            RotatingFileHandler, "doRollover", side_effect=PermissionError("locked")
        ):
            with patch.object(sys, "platform", "win32"):
                handler.doRollover()

            with patch.object(sys, "platform", "linux"):
                with pytest.raises(PermissionError):
                    handler.doRollover()
    finally:
        handler.close()


def test_get_logger_returns_named_logger():
    assert get_logger("src.core.paths").name == "src.core.paths"
