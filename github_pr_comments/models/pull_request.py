"""Pull request and comment records built from GraphQL search nodes."""

from typing import Any

from pydantic import BaseModel, Field


class CommentNode(BaseModel):
    """A single PR comment as returned by the search query."""

    author_login: str | None = None
    body: str = ""
    created_at: str = ""

    @classmethod
    def from_graphql(cls, node: dict[str, Any]) -> "CommentNode":
        """Build from a ``comments.nodes`` entry.

        A deleted (ghost) account comes back with ``author: null``.
        """
        author = node.get("author") or {}
        return cls(
            author_login=author.get("login"),
            body=node.get("body") or "",
            created_at=node.get("createdAt") or "",
        )

    def __repr__(self) -> str:
        """Return a string representation of the CommentNode object."""
        return f"<CommentNode(author='{self.author_login}', created_at='{self.created_at}')>"


class PullRequestNode(BaseModel):
    """A merged pull request with its most recent comments."""

    number: int
    title: str
    milestone_title: str | None = None
    comments: list[CommentNode] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, node: dict[str, Any]) -> "PullRequestNode":
        """Build from a ``search.nodes`` entry."""
        milestone = node.get("milestone") or {}
        comment_nodes = (node.get("comments") or {}).get("nodes") or []
        return cls(
            number=node["number"],
            title=node.get("title") or "",
            milestone_title=milestone.get("title"),
            comments=[CommentNode.from_graphql(comment) for comment in comment_nodes],
        )

    def __repr__(self) -> str:
        """Return a string representation of the PullRequestNode object."""
        return f"<PullRequestNode(number={self.number}, title='{self.title}', comments={len(self.comments)})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return {
            "number": self.number,
            "title": self.title,
            "milestone": self.milestone_title,
            "comments": [comment.model_dump() for comment in self.comments],
        }
