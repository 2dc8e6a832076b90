"""
CLI Utilities Module.

Common utility functions for CLI tools.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def validate_launcher_path(launcher_path: str) -> bool:
    """
    Validate that a launcher file exists.

    Args:
        launcher_path: Path to the installed launcher executable.

    Returns:
        True if valid, False otherwise.
    """
    path = Path(launcher_path)

    if not path.exists():
        logger.error(f"Launcher not found: {launcher_path}")
        return False

    if path.is_dir():
        logger.error(f"Launcher path is a directory: {launcher_path}")
        return False

    return True


def is_executable_file(path: str) -> bool:
    """
    Check whether a path is a regular file the current user may execute.

    Args:
        path: Path to check.

    Returns:
        True if the file exists and is executable, False otherwise.
    """
    return os.path.isfile(path) and os.access(path, os.X_OK)
