"""Per-project cleanup outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CleanupAction(Enum):
    CLEANED = "cleaned"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class CleanupOutcome:
    """What happened to one project during the interactive loop."""

    project_path: Path
    reclaimable_bytes: int
    action: CleanupAction

    @property
    def freed_bytes(self) -> int:
        return self.reclaimable_bytes if self.action is CleanupAction.CLEANED else 0
