"""Error types raised while scanning and cleaning."""

from __future__ import annotations

from pathlib import Path


class SwimCleanError(Exception):
    """Base class for all swim-clean-all failures."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(SwimCleanError):
    """Raised when a config file exists but cannot be read or parsed."""


class PathResolutionError(SwimCleanError):
    """Raised when the search root or a skipped directory does not exist."""


class ScanEntryError(SwimCleanError):
    """A single entry could not be accessed during traversal.

    Never raised out of the scanner: the entry is dropped and the walk goes on.
    """


class SizeComputationError(SwimCleanError):
    """Raised when a project's build directory cannot be sized."""


class DeletionError(SwimCleanError):
    """Raised when removing a confirmed build directory fails."""
