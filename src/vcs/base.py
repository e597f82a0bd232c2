"""Abstract version control backend interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from .snapshot import VcsSnapshot


class Vcs(ABC):
    """A repository that can describe itself as a VcsSnapshot.

    Backends are registered in vcs.SUPPORTED_VCS and tried in order.
    """

    @classmethod
    @abstractmethod
    def open_at(cls, path: Path) -> "Vcs | None":
        """Open the repository rooted at ``path``.

        Returns:
            A backend handle, or None if ``path`` is not a repository of this kind
        """
        pass

    @abstractmethod
    def read_info(self) -> VcsSnapshot:
        """Read a snapshot of the repository.

        Individual lookups that fail leave their field empty; this never raises
        for a missing config value, remote, tag or commit.
        """
        pass
