"""
Launcher Constants.
Stores the compiled-in installation layout and diagnostic messages.
"""

# Helper Layout
HELPER_APP_NAME = "Snap-O Network Inspector"
HELPER_RELATIVE_EXECUTABLE = (
    f"Helpers/{HELPER_APP_NAME}.app/Contents/MacOS/{HELPER_APP_NAME}"
)

# Diagnostics
DIAGNOSTIC_PREFIX = "snapo"
MSG_RESOLVE_FAILED = "failed to resolve helper executable path"
MSG_ALLOCATE_FAILED = "failed to allocate argument buffer"
MSG_LAUNCH_FAILED = "failed to launch helper"
REINSTALL_HINT = "Please try re-installing Snap-O."

# Exit Codes
EXIT_FAILURE = 1

# Path length limits used when the platform cannot report one
FALLBACK_MAX_PATH_WINDOWS = 260
FALLBACK_MAX_PATH_POSIX = 4096
