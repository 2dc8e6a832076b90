"""
Path Utility Module.
Derives the helper executable's location from the launcher's own location,
for both direct execution and PyInstaller bundled binaries.

The installation layout is fixed: the launcher lives two directory levels
below the installation root, and the helper lives at
``HELPER_RELATIVE_EXECUTABLE`` beneath that same root.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from src.app.constants import (
    FALLBACK_MAX_PATH_POSIX,
    FALLBACK_MAX_PATH_WINDOWS,
    HELPER_RELATIVE_EXECUTABLE,
)
from src.core.errors import FormattingError, LayoutError, ResolutionError
from src.core.logging_config import get_logger

logger = get_logger(__name__)


def get_own_executable(argv: Sequence[str]) -> str:
    """
    Returns the path the launcher was started from.

    Works for both direct execution and PyInstaller bundled binaries. A
    bundled binary reports its own location through sys.executable, since
    argv[0] is then the bare command name as typed by the caller.

    Args:
        argv: The launcher's full argument list.

    Returns:
        str: The launcher path, or an empty string if argv is empty.
    """
    if getattr(sys, "frozen", False):
        return sys.executable
    return argv[0] if argv else ""


def get_max_path_length(path: str = "/") -> int:
    """
    Returns the maximum path length, including the terminator, for the
    filesystem holding the given path.

    Args:
        path: An existing path on the filesystem to query. Defaults to "/".

    Returns:
        int: The maximum number of bytes a path may occupy.
    """
    if sys.platform == "win32":
        return FALLBACK_MAX_PATH_WINDOWS
    try:
        return os.pathconf(path, "PC_PATH_MAX")
    except (AttributeError, OSError, ValueError):
        return FALLBACK_MAX_PATH_POSIX


def get_encoded_length(path) -> int:
    """Returns the length of a path in filesystem-encoded bytes."""
    return len(os.fsencode(str(path)))


def resolve_own_path(own_argv0: str) -> Path:
    """
    Canonicalizes the launcher path into an absolute, symlink-free path.

    Args:
        own_argv0: The launcher path as seen by the operating system.

    Returns:
        Path: The resolved launcher path.

    Raises:
        ResolutionError: If the path is empty, does not exist, cannot be
            read, or exceeds the platform path length.
    """
    if not own_argv0:
        raise ResolutionError("launcher path is empty")

    try:
        resolved = Path(own_argv0).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as e:
        raise ResolutionError(f"cannot resolve {own_argv0!r}: {e}") from e

    if get_encoded_length(resolved) >= get_max_path_length(str(resolved.parent)):
        raise ResolutionError(f"resolved path too long: {resolved}")

    logger.debug(f"Resolved launcher path: {resolved}")
    return resolved


def get_installation_root(resolved_path: Path) -> Path:
    """
    Strips the executable name and its directory from a resolved path.

    Args:
        resolved_path: The canonical launcher path.

    Returns:
        Path: The installation root two levels above the launcher.

    Raises:
        LayoutError: If either component has no parent to strip.
    """
    executable_dir = resolved_path.parent
    if executable_dir == resolved_path:
        raise LayoutError(f"no containing directory for {resolved_path}")

    root = executable_dir.parent
    if root == executable_dir:
        raise LayoutError(f"no installation root above {executable_dir}")

    return root


def get_helper_path(root: Path) -> str:
    """
    Joins an installation root with the helper's relative location.

    Args:
        root: The installation root.

    Returns:
        str: The absolute helper path.

    Raises:
        FormattingError: If the path cannot be built or is too long.
    """
    try:
        helper_path = str(root / HELPER_RELATIVE_EXECUTABLE)
        too_long = get_encoded_length(helper_path) >= get_max_path_length(str(root))
    except (TypeError, ValueError) as e:
        raise FormattingError(f"cannot join {root} with helper path: {e}") from e

    if too_long:
        raise FormattingError(f"helper path too long: {helper_path}")

    return helper_path


def resolve_helper_path(own_argv0: str) -> str:
    """
    Resolves the absolute path of the helper executable.

    The helper is not checked for existence here; a missing helper surfaces
    when it is launched.

    Args:
        own_argv0: The launcher path as seen by the operating system.

    Returns:
        str: The absolute helper path.

    Raises:
        ResolutionError: If the launcher path cannot be canonicalized.
        LayoutError: If the launcher is not nested deeply enough.
        FormattingError: If the helper path cannot be built or is too long.
    """
    helper_path = get_helper_path(
        get_installation_root(resolve_own_path(own_argv0))
    )
    logger.debug(f"Helper executable: {helper_path}")
    return helper_path
