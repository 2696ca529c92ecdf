"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path

from swim_clean_all.errors import PathResolutionError, SizeComputationError

log = logging.getLogger(__name__)

_HOME_TOKEN = "~"


def xdg_config_home(env: Mapping[str, str] | None = None) -> Path | None:
    """Return XDG_CONFIG_HOME from *env*, or None when it is unset or empty."""
    env = os.environ if env is None else env
    value = env.get("XDG_CONFIG_HOME")
    return Path(value) if value else None


def expand_home(path: Path | str, home: Path | None = None) -> Path:
    """Replace a leading ``~`` component with the home directory.

    Only a bare ``~`` component is expanded; ``~user`` forms are left as-is.
    """
    path = Path(path)
    if path.parts and path.parts[0] == _HOME_TOKEN:
        home = Path.home() if home is None else home
        return home.joinpath(*path.parts[1:])
    return path


def canonicalize(path: Path | str, home: Path | None = None) -> Path:
    """Return the absolute, symlink-resolved form of an existing *path*.

    Raises:
        PathResolutionError: If the path does not exist or cannot be resolved.
    """
    try:
        return expand_home(path, home).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"Failed to canonicalize {path}: {e}", path) from e


def dir_size(path: Path | str) -> int:
    """Calculate total size of the regular files below *path*.

    Symbolic links are neither followed nor counted, so links pointing
    back into the tree cannot loop or double count. A symlinked *path*
    itself therefore counts as 0 bytes, and a regular file counts as its
    own size.

    Raises:
        SizeComputationError: If any part of the tree cannot be read.
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        raise SizeComputationError(f"Failed to get size of directory {path}: {e}", path) from e
    if stat.S_ISLNK(st.st_mode):
        return 0
    if stat.S_ISREG(st.st_mode):
        return st.st_size

    total = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    if entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            raise SizeComputationError(f"Failed to get size of directory {path}: {e}", path) from e
    return total


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def plural(count: int, noun: str) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` appended unless count is 1."""
    return f"{count} {noun}{'' if count == 1 else 's'}"


def shorten_path(path: Path, root: Path, extra_components: int = 2) -> str:
    """Truncate *path* to *root* plus at most *extra_components* more parts.

    Used for the scanning spinner so deep trees do not make the line jump.
    Directory names are rendered with a trailing slash.
    """
    keep = len(root.parts) + extra_components
    parts = path.parts[:keep]
    rendered = [part if part.endswith(os.sep) else f"{part}{os.sep}" for part in parts]
    return "".join(rendered)
