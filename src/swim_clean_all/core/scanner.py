"""Directory walking and swim project detection."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from swim_clean_all.errors import ScanEntryError
from swim_clean_all.models.project import BUILD_DIRECTORY_NAME, MARKER_FILE_NAME, ProjectCandidate
from swim_clean_all.models.search_config import SearchConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanEntry:
    """One file system entry produced by the walk."""

    path: Path
    depth: int
    is_dir: bool


EntryCallback = Callable[[ScanEntry], None]
ErrorCallback = Callable[[ScanEntryError], None]


def walk(
    config: SearchConfig,
    on_entry: EntryCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Iterator[ScanEntry]:
    """Yield entries below ``config.search_root`` in pre-order.

    The root is depth 0 and nothing deeper than ``config.max_depth`` is
    produced. Siblings come out sorted by name. A skipped path is pruned
    before it is listed or stat'ed, so nothing inside it is ever touched.
    Symbolic links are yielded as plain entries and never followed.

    Entries that cannot be accessed are logged, handed to *on_error* and
    dropped; the walk carries on with the rest of the tree.
    """
    root = config.search_root
    if config.is_skipped(root):
        log.debug("Search root %s is skipped", root)
        return

    try:
        root_is_dir = root.is_dir()
    except OSError as e:
        _drop(root, e, on_error)
        return

    # (path, depth, is_dir), popped from the end
    stack: list[tuple[Path, int, bool]] = [(root, 0, root_is_dir)]
    while stack:
        path, depth, is_dir = stack.pop()
        entry = ScanEntry(path=path, depth=depth, is_dir=is_dir)
        if on_entry:
            on_entry(entry)
        yield entry

        if not is_dir or depth >= config.max_depth:
            continue

        children = _list_children(path, config, on_error)
        # Reverse so the smallest name is popped first.
        for child_path, child_is_dir in reversed(children):
            stack.append((child_path, depth + 1, child_is_dir))


def _list_children(
    directory: Path,
    config: SearchConfig,
    on_error: ErrorCallback | None,
) -> list[tuple[Path, bool]]:
    """List non-skipped children of *directory* sorted by name."""
    children: list[tuple[Path, bool]] = []
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        _drop(directory, e, on_error)
        return children

    for entry in entries:
        child = directory / entry.name
        if config.is_skipped(child):
            log.debug("Skipping %s", child)
            continue
        try:
            child_is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            _drop(child, e, on_error)
            continue
        children.append((child, child_is_dir))
    return children


def _drop(path: Path, error: OSError, on_error: ErrorCallback | None) -> None:
    scan_error = ScanEntryError(f"Cannot access {path}: {error}", path)
    log.debug("%s", scan_error)
    if on_error:
        on_error(scan_error)


def is_project(path: Path) -> bool:
    """Whether *path* is a swim project directory with a build directory."""
    return (
        path.is_dir()
        and (path / MARKER_FILE_NAME).exists()
        and (path / BUILD_DIRECTORY_NAME).exists()
    )


def find_projects(
    config: SearchConfig,
    on_entry: EntryCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> list[ProjectCandidate]:
    """Walk the search tree and collect every swim project in it."""
    projects: list[ProjectCandidate] = []
    for entry in walk(config, on_entry=on_entry, on_error=on_error):
        if not entry.is_dir:
            continue
        try:
            matched = is_project(entry.path)
        except OSError as e:
            _drop(entry.path, e, on_error)
            continue
        if matched:
            log.info("Found swim project: %s", entry.path)
            projects.append(ProjectCandidate(entry.path))
    return projects
