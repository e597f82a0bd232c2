"""Git backend: reads a VcsSnapshot by shelling out to the git CLI."""

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.markup import escape

from common.constants import TAG_REF_PREFIX
from common.env import env
from common.logger import get_logger

from .authors import CommitRecord, User, rank_authors
from .base import Vcs
from .snapshot import VcsSnapshot

logger = get_logger(__name__)

# Field separator for git --format output
_SEP = "\x1f"

GitRunner = Callable[[Sequence[str], Path], str]


class GitError(RuntimeError):
    """Raised when a git command fails."""


def run_git(args: Sequence[str], cwd: Path) -> str:
    """Run a git sub-command and return its stdout.

    Raises:
        GitError: If git exits non-zero
        FileNotFoundError: If the git executable cannot be found
    """
    completed = subprocess.run(
        [env.git_executable(), *args],
        cwd=str(cwd),
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    if completed.returncode != 0:
        raise GitError(completed.stderr.strip() or f"git {' '.join(args)} failed")
    return completed.stdout


class GitRepository(Vcs):
    """A git working tree."""

    name = "git"

    def __init__(self, root: Path, runner: GitRunner | None = None):
        """Initialize the backend.

        Args:
            root: Top-level directory of the working tree
            runner: Callable running git commands, defaults to run_git
        """
        self.root = root
        self._runner = runner or run_git

    @classmethod
    def open_at(cls, path: Path, runner: GitRunner | None = None) -> "GitRepository | None":
        """Open ``path`` if it is the top level of a git working tree.

        Returns:
            GitRepository, or None if ``path`` is not a repository root or git
            is not installed
        """
        runner = runner or run_git
        try:
            toplevel = runner(["rev-parse", "--show-toplevel"], path).strip()
        except (GitError, FileNotFoundError, NotADirectoryError) as e:
            logger.debug(f"No git repository at {escape(str(path))}: {escape(str(e))}")
            return None

        if Path(toplevel).resolve() != Path(path).resolve():
            logger.debug(f"{escape(str(path))} is inside the git repository at {escape(toplevel)}, not its root")
            return None

        return cls(Path(toplevel), runner=runner)

    def read_info(self) -> VcsSnapshot:
        """Read user, authors, remotes, head references and latest version."""
        commits = self._commit_log()
        ranking = rank_authors(record for _, record in commits)

        head_tag = self._nearest_tag([commit_hash for commit_hash, _ in commits])
        head_ref = self._git_value("symbolic-ref", "-q", "HEAD")
        head_commit = self._git_value("rev-parse", "--verify", "-q", "HEAD")

        latest_version = None
        if head_tag and head_tag.startswith(TAG_REF_PREFIX):
            latest_version = head_tag[len(TAG_REF_PREFIX) :]

        return VcsSnapshot(
            vcs_name=self.name,
            user=self._configured_user(),
            active_authors=tuple(ranking.active),
            oldest_authors=tuple(ranking.oldest),
            remote_urls=tuple(self._remote_urls()),
            head_refs=tuple(ref for ref in (head_ref, head_tag, head_commit) if ref),
            latest_version=latest_version,
        )

    # ------------------------------------------------------------------
    # Lookups. Each one degrades to an empty result on GitError.

    def _git_value(self, *args: str) -> str | None:
        try:
            value = self._runner(list(args), self.root).strip()
        except GitError as e:
            logger.debug(f"git {escape(' '.join(args))}: {escape(str(e))}")
            return None
        return value or None

    def _configured_user(self) -> User | None:
        name = self._git_value("config", "--get", "user.name")
        if name is None:
            return None
        return User(name=name, email=self._git_value("config", "--get", "user.email"))

    def _remote_urls(self) -> list[str]:
        names = self._git_value("remote")
        if names is None:
            return []

        urls = []
        for remote in names.splitlines():
            remote = remote.strip()
            if not remote:
                continue
            url = self._git_value("remote", "get-url", remote)
            if url:
                urls.append(url)
        return urls

    def _commit_log(self) -> list[tuple[str, CommitRecord]]:
        """Return (hash, record) pairs for HEAD and its ancestry, newest first."""
        output = self._git_value("log", f"--format=%H{_SEP}%an{_SEP}%ae{_SEP}%at", "HEAD")
        if output is None:
            return []

        commits = []
        for line in output.splitlines():
            parts = line.split(_SEP)
            if len(parts) != 4:
                continue
            commit_hash, name, email, timestamp = parts
            try:
                seconds = int(timestamp)
            except ValueError:
                logger.debug(f"Skipping commit {commit_hash} with timestamp {escape(repr(timestamp))}")
                continue
            commits.append((commit_hash, CommitRecord(User(name, email or None), seconds)))
        return commits

    def _tags_by_commit(self) -> dict[str, str]:
        """Map commit hashes to the first tag ref pointing at them."""
        output = self._git_value(
            "for-each-ref",
            "--format=%(refname)%1f%(objectname)%1f%(*objectname)",
            TAG_REF_PREFIX,
        )
        if output is None:
            return {}

        tags: dict[str, str] = {}
        for line in output.splitlines():
            parts = line.split(_SEP)
            if len(parts) != 3:
                continue
            refname, target, peeled = parts
            # Annotated tags peel to their commit, lightweight tags point at it
            tags.setdefault(peeled or target, refname)
        return tags

    def _nearest_tag(self, commit_hashes: list[str]) -> str | None:
        """Return the tag ref on the newest commit in ``commit_hashes`` that has one."""
        if not commit_hashes:
            return None
        tags = self._tags_by_commit()
        for commit_hash in commit_hashes:
            if commit_hash in tags:
                return tags[commit_hash]
        return None
