"""Read-only summary of a repository, built once before the interview starts."""

from dataclasses import dataclass

from .authors import User


@dataclass(frozen=True)
class VcsSnapshot:
    """Everything the wizard takes from version control.

    Attributes:
        vcs_name: Backend name, used as the download location scheme ("git")
        user: Locally configured user, if any
        active_authors: Up to five authors with the most commits
        oldest_authors: Up to five authors ordered by recorded timestamp
        remote_urls: URLs of readable remotes
        head_refs: Symbolic HEAD ref, nearest tag ref and HEAD commit hash,
            each present only if it could be resolved
        latest_version: Nearest tag name without its refs/tags/ prefix
    """

    vcs_name: str
    user: User | None = None
    active_authors: tuple[User, ...] = ()
    oldest_authors: tuple[User, ...] = ()
    remote_urls: tuple[str, ...] = ()
    head_refs: tuple[str, ...] = ()
    latest_version: str | None = None
