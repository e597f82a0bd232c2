"""Version control introspection: author ranking and repository snapshots."""

from pathlib import Path

from rich.markup import escape

from common.logger import get_logger

from .authors import AuthorRanking, CommitRecord, User, rank_authors
from .base import Vcs
from .git import GitError, GitRepository
from .snapshot import VcsSnapshot

logger = get_logger(__name__)

# Backends tried by detect_vcs(), in order
SUPPORTED_VCS: tuple[type[Vcs], ...] = (GitRepository,)


def detect_vcs(path: Path, backends: tuple[type[Vcs], ...] = SUPPORTED_VCS) -> VcsSnapshot | None:
    """Read a snapshot from the first backend that recognises ``path``.

    Args:
        path: Directory to inspect
        backends: Backend classes to try, in order

    Returns:
        VcsSnapshot, or None if no backend recognises the directory
    """
    for backend in backends:
        repository = backend.open_at(path)
        if repository is not None:
            logger.debug(f"Reading {backend.__name__} repository at {escape(str(path))}")
            return repository.read_info()
    return None


__all__ = [
    "AuthorRanking",
    "CommitRecord",
    "GitError",
    "GitRepository",
    "SUPPORTED_VCS",
    "User",
    "Vcs",
    "VcsSnapshot",
    "detect_vcs",
    "rank_authors",
]
