#!/usr/bin/env python3
"""
Build the launcher stub as a single-file executable with PyInstaller.

The resulting binary must be installed two directory levels below the
installation root (for example <root>/bin/snapo), with the helper at
HELPER_RELATIVE_EXECUTABLE beneath that same root.

Usage:
    python scripts/build_launcher.py [--name snapo] [--dist dist]
"""

import argparse
import sys
from pathlib import Path
from typing import List

# Constants
ROOT_DIR = Path(__file__).resolve().parent.parent
ENTRY_SCRIPT = ROOT_DIR / "launcher.py"
DEFAULT_NAME = "snapo"


def build_pyinstaller_args(name: str, dist_dir: str) -> List[str]:
    """Assemble the PyInstaller command line for the launcher stub."""
    return [
        "--onefile",
        "--console",
        "--noconfirm",
        "--clean",
        "--name",
        name,
        "--distpath",
        dist_dir,
        "--paths",
        str(ROOT_DIR),
        str(ENTRY_SCRIPT),
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Build the Snap-O launcher stub")
    parser.add_argument("--name", default=DEFAULT_NAME, help="Executable name")
    parser.add_argument(
        "--dist", default=str(ROOT_DIR / "dist"), help="Output directory"
    )
    args = parser.parse_args()

    try:
        import PyInstaller.__main__
    except ImportError:
        print("✗ PyInstaller is not installed. Run: pip install .[build]")
        return 1

    pyinstaller_args = build_pyinstaller_args(args.name, args.dist)
    print(f"Building {args.name} from {ENTRY_SCRIPT}...")
    PyInstaller.__main__.run(pyinstaller_args)
    print(f"✓ Built {Path(args.dist) / args.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
