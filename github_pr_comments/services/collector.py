"""Comment aggregation service for merged pull requests."""

from collections.abc import Iterable, Sequence

from ..models import CollectedEntry, CommentNode, PullRequestNode
from ..utils import LoggerMixin


def matches_keywords(body: str, keywords: Sequence[str]) -> bool:
    """Return True if every keyword occurs in body, ignoring case.

    An empty keyword list matches every body.
    """
    haystack = body.lower()
    return all(keyword.lower() in haystack for keyword in keywords)


class CommentCollector(LoggerMixin):
    """Collects at most one qualifying comment per (author, pull request)."""

    def __init__(self, keywords: Sequence[str] = ()) -> None:
        """Initialize comment collector.

        Args:
        ----
            keywords: Keywords a comment must all contain to qualify

        """
        self.keywords = tuple(keywords)
        # author -> PR number -> entry, both levels in insertion order
        self._collected: dict[str, dict[int, CollectedEntry]] = {}

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._collected.values())

    def qualifies(self, comment: CommentNode) -> bool:
        """Check author presence and keyword match for a comment."""
        if comment.author_login is None:
            return False
        return matches_keywords(comment.body, self.keywords)

    def add_pull_request(self, pr: PullRequestNode) -> int:
        """Collect qualifying comments of a pull request.

        Args:
        ----
            pr: Pull request with its comments

        Returns:
        -------
            Number of new entries stored

        """
        added = 0
        for comment in pr.comments:
            if not self.qualifies(comment):
                continue

            entries = self._collected.setdefault(comment.author_login, {})
            if pr.number in entries:
                continue

            entry = CollectedEntry(
                pr_number=pr.number,
                title=pr.title,
                comment=comment.body,
                created_at=comment.created_at,
            )
            entries[pr.number] = entry
            self.logger.debug("Collected for %s: %s", comment.author_login, entry.to_dict())
            added += 1

        return added

    def add_pull_requests(self, prs: Iterable[PullRequestNode]) -> int:
        """Collect qualifying comments of several pull requests, in order."""
        added = sum(self.add_pull_request(pr) for pr in prs)
        self.logger.info("Collected %d entries from %d authors", added, len(self._collected))
        return added

    def get(self, author: str, pr_number: int) -> CollectedEntry | None:
        return self._collected.get(author, {}).get(pr_number)

    def authors(self) -> list[str]:
        """Authors sorted case-insensitively."""
        return sorted(self._collected, key=str.lower)

    def items(self) -> list[tuple[str, list[CollectedEntry]]]:
        """Authors in case-insensitive order with their entries in collection order."""
        return [(author, list(self._collected[author].values())) for author in self.authors()]
