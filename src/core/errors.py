"""
Launcher Errors.

Defines one exception per failure kind. Each carries the stage it belongs to
so the entry point can pick the matching diagnostic line.
"""

STAGE_RESOLVE = "resolve"
STAGE_ALLOCATE = "allocate"
STAGE_LAUNCH = "launch"


class LauncherError(Exception):
    """Base class for every failure that aborts the launcher."""

    stage = STAGE_RESOLVE


class ResolutionError(LauncherError):
    """The launcher's own path could not be canonicalized."""


class LayoutError(LauncherError):
    """The resolved path is too shallow to derive an installation root."""


class FormattingError(LauncherError):
    """The helper path could not be built within the platform path limit."""


class AllocationError(LauncherError):
    """The forwarded argument list could not be built."""

    stage = STAGE_ALLOCATE


class LaunchError(LauncherError):
    """The process image replacement call itself failed."""

    stage = STAGE_LAUNCH
