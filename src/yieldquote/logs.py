"""Logging setup for applications that quote pools."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# Logging defaults
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMATTER = "%(asctime)s: %(levelname)s: %(module)s::%(funcName)s: %(message)s"
DEFAULT_LOG_DATETIME = "%y-%m-%d %H:%M:%S"
DEFAULT_LOG_MAXBYTES = int(2e6)  # 2MB
DEFAULT_LOG_DIR = ".logging"


def setup_logging(
    log_filename: str | None = None,
    max_bytes: int | None = None,
    log_level: int | None = None,
    delete_previous_logs: bool = False,
    log_stdout: bool = True,
    log_format_string: str | None = None,
    keep_previous_handlers: bool = False,
) -> None:
    r"""Set up root logging with default settings, customized by inputs.

    Library code only emits records; applications call this once to decide where they go.

    Arguments
    ---------
    log_filename: str, optional
        Path and name of the log file. No file is written if None.
    max_bytes: int, optional
        Maximum size of the log file in bytes. Defaults to DEFAULT_LOG_MAXBYTES.
    log_level: int, optional
        Log level to track. Defaults to DEFAULT_LOG_LEVEL.
    delete_previous_logs: bool, optional
        Whether to delete previous log file if it exists. Defaults to False.
    log_stdout: bool, optional
        Whether to log to standard output. Defaults to True.
    log_format_string: str, optional
        Log format string. Defaults to DEFAULT_LOG_FORMATTER.
    keep_previous_handlers: bool, optional
        Whether to keep previous handlers. Defaults to False.
    """
    # pylint: disable=too-many-arguments
    root_logger = logging.getLogger()
    if not keep_previous_handlers:
        remove_handlers(root_logger)
    if log_stdout:
        add_stdout_handler(root_logger, log_format_string=log_format_string, log_level=log_level)
    if log_filename is not None:
        add_file_handler(
            log_filename,
            root_logger,
            delete_previous_logs=delete_previous_logs,
            log_format_string=log_format_string,
            log_level=log_level,
            max_bytes=max_bytes,
        )
    # The root logger feeds every handler, so it must pass the lowest handler level through
    if root_logger.handlers:
        root_logger.setLevel(min(handler.level for handler in root_logger.handlers))
    else:
        root_logger.setLevel(_log_level_or_default(log_level))


def close_logging(delete_logs: bool = True) -> None:
    """Close logging and remove all root handlers.

    Arguments
    ---------
    delete_logs: bool
        Whether to delete log files written by the file handlers.
    """
    logging.shutdown()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler_file_name = getattr(handler, "baseFilename", None)
        handler.close()
        if delete_logs and handler_file_name is not None and os.path.exists(handler_file_name):
            os.remove(handler_file_name)
    remove_handlers(root_logger)


def prepare_log_path(log_filename: str) -> str:
    """Return the full path of a log file, appending ".log" and creating the directory if necessary.

    Bare file names go into DEFAULT_LOG_DIR under the current working directory.
    """
    log_dir, log_name = os.path.split(log_filename)
    if not log_name.endswith(".log"):
        log_name += ".log"
    if log_dir == "":
        log_dir = os.path.join(os.getcwd(), DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, log_name)


def add_stdout_handler(
    logger: logging.Logger | None = None,
    log_format_string: str | None = None,
    log_level: int | None = None,
) -> None:
    """Add a stdout handler to the logger, which defaults to the root logger."""
    if logger is None:
        logger = logging.getLogger()
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(_log_level_or_default(log_level))
    stream_handler.setFormatter(_create_formatter(log_format_string))
    logger.addHandler(stream_handler)


def add_file_handler(
    log_filename: str,
    logger: logging.Logger | None = None,
    delete_previous_logs: bool = False,
    log_format_string: str | None = None,
    log_level: int | None = None,
    max_bytes: int | None = None,
) -> None:
    """Add a rotating file handler to the logger, which defaults to the root logger."""
    # pylint: disable=too-many-arguments
    if logger is None:
        logger = logging.getLogger()
    log_path = prepare_log_path(log_filename)
    if delete_previous_logs and os.path.exists(log_path):
        os.remove(log_path)
    file_handler = RotatingFileHandler(
        log_path, mode="w", maxBytes=max_bytes if max_bytes is not None else DEFAULT_LOG_MAXBYTES
    )
    file_handler.setFormatter(_create_formatter(log_format_string))
    file_handler.setLevel(_log_level_or_default(log_level))
    logger.addHandler(file_handler)


def remove_handlers(logger: logging.Logger) -> None:
    """Remove all handlers from the logger."""
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])


def _create_formatter(log_format_string: str | None = None) -> logging.Formatter:
    if log_format_string is None:
        log_format_string = DEFAULT_LOG_FORMATTER
    return logging.Formatter(log_format_string, DEFAULT_LOG_DATETIME)


def _log_level_or_default(log_level: int | None = None) -> int:
    if log_level is None:
        return DEFAULT_LOG_LEVEL
    return log_level
