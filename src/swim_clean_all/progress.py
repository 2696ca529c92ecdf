"""Scanning spinner shown while the directory tree is walked."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from swim_clean_all.core.scanner import ScanEntry
from swim_clean_all.utils import shorten_path

_BASE_MESSAGE = "Scanning for cleanable swim projects"


class ScanSpinner:
    """Transient spinner on stderr that follows the walk.

    Use as a context manager and pass :meth:`update` to the scanner as its
    ``on_entry`` observer. The spinner line is erased on exit.
    """

    def __init__(self, search_root: Path, console: Console | None = None) -> None:
        self._root = search_root
        self._console = console or Console(stderr=True, highlight=False)
        self._status: Status | None = None
        self._last_shown = ""

    def __enter__(self) -> ScanSpinner:
        self._status = self._console.status(_BASE_MESSAGE, spinner="dots")
        self._status.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    @property
    def shown_directory(self) -> str:
        """The truncated directory the spinner currently displays."""
        return self._last_shown

    def update(self, entry: ScanEntry) -> None:
        """Show the directory currently being scanned."""
        if self._status is None:
            return
        directory = entry.path if entry.is_dir else entry.path.parent
        shown = shorten_path(directory, self._root)
        if shown == self._last_shown:
            return
        self._last_shown = shown
        self._status.update(f"{_BASE_MESSAGE} [bold]\\[{escape(shown)}][/bold]")
