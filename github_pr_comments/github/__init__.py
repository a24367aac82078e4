"""
GitHub GraphQL access: search query construction and paginated fetching
"""

from .client import GitHubGraphQLClient
from .queries import SEARCH_PULL_REQUESTS_QUERY, build_search_query

__all__ = [
    "GitHubGraphQLClient",
    "SEARCH_PULL_REQUESTS_QUERY",
    "build_search_query",
]
