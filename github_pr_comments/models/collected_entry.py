"""Collected entry data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CollectedEntry(BaseModel):
    """The first qualifying comment of one author on one pull request."""

    model_config = ConfigDict(frozen=True)

    pr_number: int
    title: str
    comment: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return {
            "pr": self.pr_number,
            "title": self.title,
            "comment": self.comment,
            "createdAt": self.created_at,
        }
