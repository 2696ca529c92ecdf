"""Scanning and interactive cleaning orchestration engine."""

from __future__ import annotations

import logging
import shutil
from typing import Callable

from swim_clean_all.core.scanner import EntryCallback, ErrorCallback, find_projects
from swim_clean_all.errors import DeletionError
from swim_clean_all.models.cleanup_outcome import CleanupAction, CleanupOutcome
from swim_clean_all.models.project import ProjectCandidate
from swim_clean_all.models.search_config import SearchConfig
from swim_clean_all.utils import bytes_to_human, dir_size

log = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"y", "Y", "yes"})

ConfirmCallback = Callable[[str], bool]  # (prompt) -> operator said yes
OutcomeCallback = Callable[[CleanupOutcome], None]


def is_affirmative(answer: str) -> bool:
    """Whether a typed answer means yes. Anything unrecognised means no."""
    return answer.strip() in AFFIRMATIVE_ANSWERS


def clean_prompt(project: ProjectCandidate, size_bytes: int) -> str:
    return f"Clean {project.path}? ({bytes_to_human(size_bytes)}) [y/n]"


class CleanAllEngine:
    """Finds swim projects and walks the operator through cleaning them."""

    def __init__(self, config: SearchConfig) -> None:
        self.config = config

    def scan(
        self,
        on_entry: EntryCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> list[ProjectCandidate]:
        """Find all cleanable projects below the search root.

        Each call walks the whole tree again.
        """
        log.info("Searching in: %s", self.config.search_root)
        projects = find_projects(self.config, on_entry=on_entry, on_error=on_error)
        log.info("Found %d cleanable project(s)", len(projects))
        return projects

    def measure(self, projects: list[ProjectCandidate]) -> list[int]:
        """Return the build directory size of each project, in order.

        Raises:
            SizeComputationError: If any build directory cannot be sized.
        """
        sizes = []
        for project in projects:
            size = dir_size(project.build_dir)
            log.debug("Build directory %s holds %d bytes", project.build_dir, size)
            sizes.append(size)
        return sizes

    def clean(
        self,
        projects: list[ProjectCandidate],
        sizes: list[int],
        confirm: ConfirmCallback,
        on_result: OutcomeCallback | None = None,
    ) -> int:
        """Offer each project for cleaning and return the total bytes freed.

        Args:
            projects: Projects to offer, in presentation order.
            sizes: Precomputed build directory size of each project.
            confirm: Asks the operator whether to clean one project.
            on_result: Optional callback fired after each project is handled.

        Raises:
            DeletionError: If a confirmed build directory cannot be removed.
                Remaining projects are not offered.
        """
        if len(projects) != len(sizes):
            raise ValueError("every project needs exactly one size")

        freed = 0
        for project, size in zip(projects, sizes):
            if confirm(clean_prompt(project, size)):
                self._remove_build_dir(project)
                outcome = CleanupOutcome(project.path, size, CleanupAction.CLEANED)
                freed += size
            else:
                outcome = CleanupOutcome(project.path, size, CleanupAction.SKIPPED)
            log.debug("%s: %s", project.path, outcome.action.value)
            if on_result:
                on_result(outcome)
        return freed

    def _remove_build_dir(self, project: ProjectCandidate) -> None:
        build_dir = project.build_dir
        try:
            # A symlinked or plain-file build entry is removed itself, never its target.
            if build_dir.is_symlink() or not build_dir.is_dir():
                build_dir.unlink()
            else:
                shutil.rmtree(build_dir)
        except OSError as e:
            raise DeletionError(
                f"Failed to remove build directory for project at {project.path}: {e}",
                project.build_dir,
            ) from e
        log.info("Removed %s", project.build_dir)
