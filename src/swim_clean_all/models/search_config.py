"""Search configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MAX_DEPTH = 100


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Where to look for projects and what to leave alone.

    All paths are canonical (absolute, symlinks resolved) so that skip
    matching is a plain prefix comparison.
    """

    search_root: Path
    skip_list: frozenset[Path] = field(default_factory=frozenset)
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    def is_skipped(self, path: Path) -> bool:
        """Whether *path* is a skipped directory or lies below one."""
        return any(path.is_relative_to(skipped) for skipped in self.skip_list)
