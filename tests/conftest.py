"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from swim_clean_all.models.search_config import SearchConfig


@pytest.fixture
def make_project():
    """Factory creating a swim project with a build directory of given size."""

    def _make(parent: Path, name: str = "proj", build_bytes: int = 1024) -> Path:
        project = parent / name
        (project / "src").mkdir(parents=True)
        (project / "swim.toml").write_text('name = "proj"\n')
        (project / "src" / "main.x").write_text("entity main() -> bool { true }\n")
        build = project / "build"
        build.mkdir()
        (build / "file.bin").write_bytes(b"b" * build_bytes)
        return project

    return _make


@pytest.fixture
def search_config(tmp_path):
    """Factory for a SearchConfig rooted at the resolved tmp_path."""

    def _make(skip: tuple[Path, ...] = (), max_depth: int = 100, root: Path | None = None) -> SearchConfig:
        return SearchConfig(
            search_root=(root or tmp_path).resolve(),
            skip_list=frozenset(p.resolve() for p in skip),
            max_depth=max_depth,
        )

    return _make
