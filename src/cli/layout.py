#!/usr/bin/env python3
"""
Installation Layout CLI.

Provides command-line tools for inspecting where an installed launcher will
look for its helper, and for verifying that the helper is in place. The
helper is never started.

Usage:
    python -m src.cli.layout show --launcher /opt/snapo/bin/snapo
    python -m src.cli.layout check --launcher /opt/snapo/bin/snapo -v
"""

import argparse
import logging
import sys

from src.app.constants import HELPER_RELATIVE_EXECUTABLE, REINSTALL_HINT
from src.cli.utils import is_executable_file, validate_launcher_path
from src.core.errors import LauncherError
from src.core.logging_config import setup_logging, shutdown_logging
from src.core.paths import (
    get_helper_path,
    get_installation_root,
    resolve_own_path,
)

logger = logging.getLogger(__name__)


def _print_layout(launcher: str) -> str:
    """Print the resolved layout and return the helper path."""
    resolved = resolve_own_path(launcher)
    root = get_installation_root(resolved)
    helper_path = get_helper_path(root)

    print(f"Launcher:  {resolved}")
    print(f"Root:      {root}")
    print(f"Suffix:    {HELPER_RELATIVE_EXECUTABLE}")
    print(f"Helper:    {helper_path}")
    return helper_path


def show_layout(args: argparse.Namespace) -> int:
    """Show the installation root and helper path for a launcher."""
    try:
        _print_layout(args.launcher)
        return 0
    except LauncherError as e:
        logger.error(f"Failed to resolve layout: {e}")
        print(f"✗ {type(e).__name__}: {e}")
        return 1


def check_layout(args: argparse.Namespace) -> int:
    """Verify that the helper is installed where the launcher expects it."""
    try:
        helper_path = _print_layout(args.launcher)
    except LauncherError as e:
        logger.error(f"Failed to resolve layout: {e}")
        print(f"✗ {type(e).__name__}: {e}")
        print(REINSTALL_HINT)
        return 1

    if is_executable_file(helper_path):
        print("✓ Helper is installed and executable")
        return 0

    logger.debug(f"Helper check failed for {helper_path}")
    print("✗ Helper is missing or not executable")
    print(REINSTALL_HINT)
    return 1


def main():
    parser = argparse.ArgumentParser(
        description="Inspect the Snap-O launcher installation layout"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_p = subparsers.add_parser("show", help="Show resolved helper location")
    show_p.add_argument(
        "--launcher", "-l", required=True, help="Path to the installed launcher"
    )
    show_p.set_defaults(func=show_layout)

    check_p = subparsers.add_parser(
        "check", help="Verify the helper is installed and executable"
    )
    check_p.add_argument(
        "--launcher", "-l", required=True, help="Path to the installed launcher"
    )
    check_p.set_defaults(func=check_layout)

    args = parser.parse_args()

    setup_logging(debug_mode=args.verbose, log_path=args.log_file)

    try:
        if hasattr(args, "launcher"):
            if not validate_launcher_path(args.launcher):
                sys.exit(1)

        if hasattr(args, "func"):
            sys.exit(args.func(args))
        else:
            parser.print_help()
            sys.exit(1)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
