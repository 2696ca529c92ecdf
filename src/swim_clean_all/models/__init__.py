"""swim-clean-all data models."""

from swim_clean_all.models.search_config import SearchConfig
from swim_clean_all.models.project import BUILD_DIRECTORY_NAME, MARKER_FILE_NAME, ProjectCandidate
from swim_clean_all.models.cleanup_outcome import CleanupAction, CleanupOutcome

__all__ = [
    "BUILD_DIRECTORY_NAME",
    "CleanupAction",
    "CleanupOutcome",
    "MARKER_FILE_NAME",
    "ProjectCandidate",
    "SearchConfig",
]
