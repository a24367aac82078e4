"""
Typed records for pull requests, comments and collected entries
"""

from .pull_request import CommentNode, PullRequestNode
from .collected_entry import CollectedEntry

__all__ = [
    "CommentNode",
    "PullRequestNode",
    "CollectedEntry",
]
