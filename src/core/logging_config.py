"""
Logging Configuration Module.

This module provides centralized logging configuration for the developer
tooling, including an optional rotating file handler and console output.

The launcher itself never calls setup_logging(): its modules only emit DEBUG
records, so an unconfigured root logger keeps its stderr output limited to
the single diagnostic line.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Configuration
MAX_BYTES = 1 * 1024 * 1024  # 1 MB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(RotatingFileHandler):
    """
    A RotatingFileHandler that handles Windows file locking errors gracefully.

    On Windows, log rotation can fail with PermissionError if the file is still
    in use by another process. This handler keeps writing to the current file
    instead of crashing.
    """

    def doRollover(self) -> None:
        """
        Perform log file rotation, catching Windows file locking errors.
        """
        try:
            super().doRollover()
        except PermissionError:
            if sys.platform != "win32":
                raise
            # Rotation is retried on the next record


def setup_logging(
    debug_mode: bool = False,
    log_to_console: bool = True,
    log_path: Optional[str] = None,
) -> None:
    """
    Configures the root logger with an optional rotating file handler
    and an optional console handler on stderr.

    Args:
        debug_mode (bool): If True, sets level to DEBUG. Defaults to False (INFO).
        log_to_console (bool): If True, adds a StreamHandler. Defaults to True.
        log_path (Optional[str]): File to log to. Defaults to None (no file).
    """
    root_logger = logging.getLogger()

    # Remove existing handlers to avoid duplicates if called multiple times
    if root_logger.handlers:
        root_logger.handlers.clear()

    level = logging.DEBUG if debug_mode else logging.INFO
    root_logger.setLevel(level)

    if log_path:
        try:
            log_dir = os.path.dirname(log_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = SafeRotatingFileHandler(
                log_path,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
            )
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"Could not set up file logging: {e}", file=sys.stderr)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger with the given name.

    Args:
        name (str): The name of the logger (usually __name__).

    Returns:
        logging.Logger: The logger instance.
    """
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Explicitly closes all logging handlers to release file locks.
    """
    logging.shutdown()
