"""Tests for logging utils modules."""

from __future__ import annotations

import logging
import os

import pytest

from .logs import (
    add_file_handler,
    add_stdout_handler,
    close_logging,
    prepare_log_path,
    remove_handlers,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger level and handlers that pytest installed."""
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield
    remove_handlers(root_logger)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestLogging:
    """Run the logging tests."""

    def test_logging_to_file(self, tmp_path):
        """Records at or above the configured level reach the log file."""
        log_filename = str(tmp_path / "test_logging")
        setup_logging(log_filename=log_filename, log_stdout=False, log_level=logging.WARNING)
        logging.info("Info test")
        logging.warning("Warning test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(log_filename + ".log", mode="r", encoding="UTF-8") as file:
            contents = file.read()
        close_logging(delete_logs=True)
        assert "Warning test" in contents
        assert "Info test" not in contents
        assert not os.path.exists(log_filename + ".log")

    def test_multiple_handlers_setup_logging(self, tmp_path):
        """Verifies that two handlers are created if we log to file and stdout."""
        log_filename = str(tmp_path / "test_logging.log")
        # one handler because we're logging to file only
        setup_logging(log_filename=log_filename, log_stdout=False, keep_previous_handlers=False)
        assert len(logging.getLogger().handlers) == 1
        close_logging()
        # No handlers after closing
        assert len(logging.getLogger().handlers) == 0
        # one handler because we're logging to stdout only
        setup_logging(log_stdout=True)
        assert len(logging.getLogger().handlers) == 1
        close_logging()
        assert len(logging.getLogger().handlers) == 0
        # two handlers because we're logging to file and stdout
        setup_logging(log_filename=log_filename, log_stdout=True)
        assert len(logging.getLogger().handlers) == 2
        close_logging()
        assert len(logging.getLogger().handlers) == 0

    def test_multiple_handlers_add_handlers(self, tmp_path):
        """Handlers added one at a time stack on the root logger."""
        log_filename = str(tmp_path / "test_logging.log")
        remove_handlers(logging.getLogger())
        add_stdout_handler()
        add_file_handler(log_filename=log_filename)
        assert len(logging.getLogger().handlers) == 2
        close_logging()
        assert len(logging.getLogger().handlers) == 0

    def test_prepare_log_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        log_path = prepare_log_path("quotes")
        assert log_path == os.path.join(str(tmp_path), ".logging", "quotes.log")
        assert os.path.isdir(os.path.join(str(tmp_path), ".logging"))
        assert prepare_log_path(str(tmp_path / "other" / "quotes.log")) == str(tmp_path / "other" / "quotes.log")
