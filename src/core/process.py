"""
Process Replacement Module.

Hands control from the launcher to the helper executable. On POSIX systems
the launcher's process image is replaced with os.execv, so the helper keeps
the launcher's process ID, open standard streams, environment and signal
delivery, and its exit status is what the caller observes.

Windows has no true image replacement (os.execv there starts a new process
and exits the caller immediately), so the helper is spawned as a child and
the launcher exits with the child's return code. The helper then runs under
a new process ID.
"""

import os
import signal
import subprocess
import sys
from typing import List, NoReturn, Sequence

from src.core.errors import AllocationError, LaunchError
from src.core.logging_config import get_logger

logger = get_logger(__name__)


def build_forwarded_args(helper_path: str, original_args: Sequence[str]) -> List[str]:
    """
    Builds the helper's argument list from the launcher's.

    Slot 0 becomes the helper path; every later argument is copied verbatim
    and in order, so the result has the same length as original_args.

    Args:
        helper_path: Absolute path of the helper executable.
        original_args: The launcher's full argument list, argv[0] included.

    Returns:
        List[str]: The forwarded argument list.

    Raises:
        AllocationError: If the list cannot be allocated.
    """
    try:
        forwarded = [helper_path]
        forwarded.extend(original_args[1:])
    except MemoryError as e:
        raise AllocationError("cannot allocate forwarded argument list") from e
    return forwarded


def _flush_standard_streams() -> None:
    # execv discards Python's userspace buffers
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


def _spawn_and_wait(helper_path: str, args: List[str]) -> NoReturn:
    """Runs the helper as a child process and exits with its status."""
    logger.debug(f"Spawning helper: {args!r}")
    # Console Ctrl-C reaches the child directly; the parent just waits for it
    previous_handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        completed = subprocess.run(args, executable=helper_path, check=False)
    except OSError as e:
        raise LaunchError(_describe(e)) from e
    finally:
        signal.signal(signal.SIGINT, previous_handler)
    sys.exit(completed.returncode)


def launch(helper_path: str, original_args: Sequence[str]) -> NoReturn:
    """
    Replaces the current process with the helper executable.

    Args:
        helper_path: Absolute path of the helper executable.
        original_args: The launcher's full argument list, argv[0] included.

    Raises:
        AllocationError: If the forwarded argument list cannot be built.
        LaunchError: If the helper cannot be executed (missing, not
            executable, permission denied).
    """
    args = build_forwarded_args(helper_path, original_args)

    if sys.platform == "win32":
        _spawn_and_wait(helper_path, args)

    logger.debug(f"Replacing process image with {args!r}")
    _flush_standard_streams()
    try:
        os.execv(helper_path, args)
    except OSError as e:
        raise LaunchError(_describe(e)) from e
