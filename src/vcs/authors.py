"""Author identities and ranking over a commit history.

History is consumed newest-first, the order git walks it from HEAD. Each
identity is tallied once per commit, and two rankings are derived from the
same tally:

- active: most commits first
- oldest: ascending by the timestamp recorded when the identity was first
  met in the walk. Since the walk starts at HEAD, that is the identity's most
  recent commit, not its earliest one.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from common.constants import MAX_RANKED_AUTHORS


@dataclass(frozen=True)
class User:
    """A contributor identity. Two users are equal only if name and email match."""

    name: str
    email: str | None = None

    def __str__(self) -> str:
        if self.email:
            return f"{self.name} ({self.email})"
        return self.name


@dataclass(frozen=True)
class CommitRecord:
    """One commit observation: who authored it and when."""

    author: User
    timestamp: int


@dataclass
class _Tally:
    count: int
    first_seen: int


@dataclass(frozen=True)
class AuthorRanking:
    """Deduplicated authors of a history and the two rankings derived from them."""

    authors: list[User] = field(default_factory=list)
    active: list[User] = field(default_factory=list)
    oldest: list[User] = field(default_factory=list)


def rank_authors(
    commits: Iterable[CommitRecord],
    limit: int = MAX_RANKED_AUTHORS,
) -> AuthorRanking:
    """Rank the authors of a commit history.

    Args:
        commits: Commit observations, newest first
        limit: Maximum length of each ranking

    Returns:
        AuthorRanking with authors in first-seen order and both rankings
        truncated to ``limit``. Ties keep first-seen order.
    """
    authors: list[User] = []
    tallies: dict[User, _Tally] = {}

    for commit in commits:
        tally = tallies.get(commit.author)
        if tally is None:
            tallies[commit.author] = _Tally(count=0, first_seen=commit.timestamp)
            authors.append(commit.author)
        else:
            tally.count += 1

    # sorted() is stable and leaves `authors` in walk order
    active = sorted(authors, key=lambda user: tallies[user].count, reverse=True)
    oldest = sorted(authors, key=lambda user: tallies[user].first_seen)

    return AuthorRanking(
        authors=list(authors),
        active=active[:limit],
        oldest=oldest[:limit],
    )
