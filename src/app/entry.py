"""
Launcher Entry Point.

This module contains the main() function that takes the launcher through its
two stages: resolving the helper's location, then replacing the current
process with it. Any failure ends the launcher with one diagnostic line on
stderr and exit status 1.
"""

import sys
from typing import Optional, Sequence

from src.app.constants import (
    DIAGNOSTIC_PREFIX,
    EXIT_FAILURE,
    MSG_ALLOCATE_FAILED,
    MSG_LAUNCH_FAILED,
    MSG_RESOLVE_FAILED,
)
from src.core.errors import STAGE_ALLOCATE, STAGE_LAUNCH, LauncherError
from src.core.logging_config import get_logger
from src.core.paths import get_own_executable, resolve_helper_path
from src.core.process import launch

logger = get_logger(__name__)


def format_diagnostic(error: LauncherError) -> str:
    """
    Builds the single stderr line reported for a failed stage.

    Args:
        error: The error that aborted the launcher.

    Returns:
        str: The diagnostic line, without a trailing newline.
    """
    if error.stage == STAGE_LAUNCH:
        return f"{DIAGNOSTIC_PREFIX}: {MSG_LAUNCH_FAILED}: {error}"
    if error.stage == STAGE_ALLOCATE:
        return f"{DIAGNOSTIC_PREFIX}: {MSG_ALLOCATE_FAILED}"
    return f"{DIAGNOSTIC_PREFIX}: {MSG_RESOLVE_FAILED}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Launcher entry point.

    Args:
        argv: The launcher's full argument list. Defaults to sys.argv.

    Returns:
        int: EXIT_FAILURE. On success the process is replaced and this
            function never returns.
    """
    if argv is None:
        argv = sys.argv

    try:
        logger.debug("Resolving helper executable")
        helper_path = resolve_helper_path(get_own_executable(argv))

        logger.debug("Launching helper executable")
        launch(helper_path, argv)
    except LauncherError as e:
        logger.debug(f"Launcher failed in {e.stage} stage: {e}")
        print(format_diagnostic(e), file=sys.stderr)
        return EXIT_FAILURE

    # launch() only comes back here if the replacement call returned
    return EXIT_FAILURE


def run() -> None:
    """Console script wrapper around main()."""
    sys.exit(main())
