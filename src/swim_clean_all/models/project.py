"""Detected swim project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MARKER_FILE_NAME = "swim.toml"

# swim always writes its output here
BUILD_DIRECTORY_NAME = "build"


@dataclass(frozen=True, slots=True)
class ProjectCandidate:
    """A directory holding a swim.toml and a build directory."""

    path: Path

    @property
    def build_dir(self) -> Path:
        """The disposable build-output subtree."""
        return self.path / BUILD_DIRECTORY_NAME
