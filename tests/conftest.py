import os
import pathlib
import stat
import sys
from dataclasses import dataclass

import pytest

# Ensure project root is in sys.path
repo_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from src.app.constants import HELPER_RELATIVE_EXECUTABLE  # noqa: E402

HELPER_SCRIPT = """#!/bin/sh
echo "pid=$$"
echo "argv0=$0"
echo "env=$SNAPO_TEST_MARKER"
for arg in "$@"; do
    echo "arg=$arg"
done
exit 7
"""


@dataclass
class Installation:
    """A fake installation tree: <root>/bin/snapo plus the helper location."""

    root: pathlib.Path
    launcher: pathlib.Path
    helper: pathlib.Path

    def install_helper(self, content: str = HELPER_SCRIPT, mode: int = 0o755):
        self.helper.parent.mkdir(parents=True, exist_ok=True)
        self.helper.write_text(content)
        os.chmod(self.helper, mode)
        return self.helper


def _make_executable(path: pathlib.Path, content: str) -> None:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR)


@pytest.fixture
def installation(tmp_path):
    """
    Provides an installation root with the launcher at <root>/bin/snapo.
    The helper is not installed; call install_helper() to add it.
    """
    root = (tmp_path / "opt" / "app").resolve()
    bin_dir = root / "bin"
    bin_dir.mkdir(parents=True)

    launcher = bin_dir / "snapo"
    _make_executable(launcher, "#!/bin/sh\nexit 0\n")

    return Installation(
        root=root,
        launcher=launcher,
        helper=root / HELPER_RELATIVE_EXECUTABLE,
    )
