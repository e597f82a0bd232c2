"""Tests for the git backend.

Integration tests build a temporary repository with the git CLI; the
degradation tests replace the command runner with canned responses.
"""

import os
import subprocess
from pathlib import Path

import pytest

from vcs import SUPPORTED_VCS, detect_vcs
from vcs.authors import User
from vcs.git import GitError, GitRepository
from vcs.snapshot import VcsSnapshot

LOG_ARGS = "log --format=%H\x1f%an\x1f%ae\x1f%at HEAD"
TAGS_ARGS = "for-each-ref --format=%(refname)%1f%(objectname)%1f%(*objectname) refs/tags/"


def git(repo_path, *args, env=None):
    """Run a git command in the test repository."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
        env={**os.environ, **(env or {})},
    )
    return result.stdout.strip()


def commit_as(repo_path, author, timestamp, message="commit"):
    """Commit a change authored by ``author`` ("Name <email>") at ``timestamp``."""
    (repo_path / "file.txt").write_text(f"{message}\n")
    git(repo_path, "add", ".")
    date = f"{timestamp} +0000"
    git(
        repo_path,
        "commit",
        "-m",
        message,
        f"--author={author}",
        env={"GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date},
    )
    return git(repo_path, "rev-parse", "HEAD")


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create a temporary git repository with proper git config.
    Returns the repo path.
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "user.email", "test@example.com")

    return repo_path


@pytest.fixture
def history_repo(temp_git_repo):
    """Repository with three commits by two authors, a tag and a remote."""
    commit_as(temp_git_repo, "Alice <alice@example.com>", 1_600_000_000, "first")
    commit_as(temp_git_repo, "Bob <bob@example.com>", 1_600_000_100, "second")
    git(temp_git_repo, "tag", "-a", "v1.0", "-m", "release 1.0")
    commit_as(temp_git_repo, "Alice <alice@example.com>", 1_600_000_200, "third")
    git(temp_git_repo, "remote", "add", "origin", "https://example.com/repo.git")
    return temp_git_repo


def fake_runner(responses):
    """Runner answering from ``responses``; anything else fails like git would."""

    def run(args, cwd):
        key = " ".join(args)
        if key not in responses:
            raise GitError(f"fatal: {key}")
        return responses[key]

    return run


class TestOpenAt:
    """Tests for GitRepository.open_at."""

    def test_opens_repository_root(self, temp_git_repo):
        repository = GitRepository.open_at(temp_git_repo)
        assert repository is not None
        assert repository.root.resolve() == temp_git_repo.resolve()

    def test_not_a_repository(self, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()
        assert GitRepository.open_at(plain) is None

    def test_subdirectory_is_not_a_root(self, temp_git_repo):
        subdir = temp_git_repo / "sub"
        subdir.mkdir()
        assert GitRepository.open_at(subdir) is None

    def test_git_not_installed(self, tmp_path):
        def missing_git(args, cwd):
            raise FileNotFoundError("git")

        assert GitRepository.open_at(tmp_path, runner=missing_git) is None


class TestReadInfo:
    """Tests for GitRepository.read_info against a real repository."""

    def test_full_snapshot(self, history_repo):
        head = git(history_repo, "rev-parse", "HEAD")

        snapshot = GitRepository.open_at(history_repo).read_info()

        assert snapshot.vcs_name == "git"
        assert snapshot.user == User("Test User", "test@example.com")
        assert snapshot.remote_urls == ("https://example.com/repo.git",)
        assert snapshot.head_refs == ("refs/heads/main", "refs/tags/v1.0", head)
        assert snapshot.latest_version == "v1.0"

    def test_author_rankings(self, history_repo):
        snapshot = GitRepository.open_at(history_repo).read_info()

        alice = User("Alice", "alice@example.com")
        bob = User("Bob", "bob@example.com")
        assert snapshot.active_authors == (alice, bob)
        # Alice was last seen after Bob, so Bob ranks first
        assert snapshot.oldest_authors == (bob, alice)

    def test_lightweight_tag_on_head(self, temp_git_repo):
        commit_as(temp_git_repo, "Alice <alice@example.com>", 1_600_000_000)
        git(temp_git_repo, "tag", "0.3.0")

        snapshot = GitRepository.open_at(temp_git_repo).read_info()

        assert snapshot.latest_version == "0.3.0"
        assert "refs/tags/0.3.0" in snapshot.head_refs

    def test_empty_repository(self, temp_git_repo):
        """Test that a repository without commits still yields a snapshot."""
        snapshot = GitRepository.open_at(temp_git_repo).read_info()

        assert snapshot.active_authors == ()
        assert snapshot.oldest_authors == ()
        assert snapshot.latest_version is None
        assert snapshot.remote_urls == ()
        assert snapshot.head_refs == ("refs/heads/main",)

    def test_detached_head(self, history_repo):
        head = git(history_repo, "rev-parse", "HEAD")
        git(history_repo, "checkout", "--detach")

        snapshot = GitRepository.open_at(history_repo).read_info()

        assert snapshot.head_refs == ("refs/tags/v1.0", head)


class TestDegradation:
    """Failed lookups leave fields empty instead of raising."""

    def test_everything_fails(self, tmp_path):
        repository = GitRepository(tmp_path, runner=fake_runner({}))

        assert repository.read_info() == VcsSnapshot(vcs_name="git")

    def test_user_without_email(self, tmp_path):
        runner = fake_runner({"config --get user.name": "Solo Dev\n"})

        snapshot = GitRepository(tmp_path, runner=runner).read_info()

        assert snapshot.user == User("Solo Dev", None)

    def test_unreadable_remote_is_skipped(self, tmp_path):
        runner = fake_runner(
            {
                "remote": "broken\norigin\n",
                "remote get-url origin": "git@example.com:team/repo.git\n",
            }
        )

        snapshot = GitRepository(tmp_path, runner=runner).read_info()

        assert snapshot.remote_urls == ("git@example.com:team/repo.git",)

    def test_log_parsing(self, tmp_path):
        log = (
            "c3\x1fAlice\x1falice@x\x1f300\n"
            "c2\x1fBob\x1f\x1f200\n"
            "garbage line\n"
            "c1\x1fAlice\x1falice@x\x1f100\n"
        )
        tags = "refs/tags/v2\x1fc2\x1f\n"
        runner = fake_runner({LOG_ARGS: log, TAGS_ARGS: tags})

        snapshot = GitRepository(tmp_path, runner=runner).read_info()

        assert snapshot.active_authors == (User("Alice", "alice@x"), User("Bob"))
        assert snapshot.oldest_authors == (User("Bob"), User("Alice", "alice@x"))
        assert snapshot.head_refs == ("refs/tags/v2",)
        assert snapshot.latest_version == "v2"

    def test_annotated_tag_matches_peeled_commit(self, tmp_path):
        log = "c1\x1fAlice\x1falice@x\x1f100\n"
        tags = "refs/tags/v1\x1ftagobject\x1fc1\n"
        runner = fake_runner({LOG_ARGS: log, TAGS_ARGS: tags})

        snapshot = GitRepository(tmp_path, runner=runner).read_info()

        assert snapshot.latest_version == "v1"


class TestDetectVcs:
    """Tests for detect_vcs."""

    def test_git_is_supported(self):
        assert GitRepository in SUPPORTED_VCS

    def test_detects_git(self, history_repo):
        snapshot = detect_vcs(history_repo)
        assert snapshot is not None
        assert snapshot.vcs_name == "git"

    def test_no_vcs(self, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()
        assert detect_vcs(plain) is None

    def test_first_matching_backend_wins(self, tmp_path):
        class NeverMatches(GitRepository):
            @classmethod
            def open_at(cls, path, runner=None):
                return None

        class AlwaysMatches(GitRepository):
            @classmethod
            def open_at(cls, path, runner=None):
                return cls(Path(path), runner=fake_runner({}))

        snapshot = detect_vcs(tmp_path, backends=(NeverMatches, AlwaysMatches))

        assert snapshot == VcsSnapshot(vcs_name="git")
