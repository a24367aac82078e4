"""GitHub GraphQL client for collecting merged pull requests."""

from collections.abc import Callable
from typing import Any

import requests

from github_pr_comments.config import get_github_headers, get_settings
from github_pr_comments.exceptions import GitHubGraphQLError, GitHubHTTPError
from github_pr_comments.github.queries import SEARCH_PULL_REQUESTS_QUERY
from github_pr_comments.models import PullRequestNode
from github_pr_comments.utils import get_logger

logger = get_logger(__name__)


def _error_message(error: object) -> str:
    """Message of a GraphQL error entry, which may not be an object."""
    if isinstance(error, dict):
        return str(error.get("message", "Unknown error"))
    return str(error)


class GitHubGraphQLClient:
    """GitHub GraphQL client with cursor pagination and error handling."""

    def __init__(self, access_token: str | None = None, api_url: str | None = None) -> None:
        """Initialize GitHub GraphQL client.

        Args:
        ----
            access_token: GitHub personal access token for authentication
            api_url: GraphQL endpoint, defaults to the configured one

        """
        settings = get_settings()
        self.access_token = access_token
        self.api_url = api_url or settings.github_graphql_url
        self.session = requests.Session()
        self.session.headers.update(get_github_headers(self.access_token))

        if not self.access_token:
            logger.warning("No GitHub token provided, using unauthenticated requests")

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL document.

        Args:
        ----
            query: GraphQL document
            variables: Query variables

        Returns:
        -------
            The ``data`` member of the response

        Raises:
        ------
            GitHubHTTPError: On transport failure or a non-200 status
            GitHubGraphQLError: If the payload carries an ``errors`` array

        """
        logger.debug("Making POST request to %s", self.api_url)

        try:
            response = self.session.post(self.api_url, json={"query": query, "variables": variables or {}})
        except requests.RequestException as e:
            logger.exception("Request failed")
            raise GitHubHTTPError(str(e)) from e

        if response.status_code != 200:
            reason = response.reason or f"HTTP {response.status_code}"
            logger.error("GraphQL request returned %d %s", response.status_code, reason)
            raise GitHubHTTPError(reason, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.exception("GraphQL response is not valid JSON")
            raise GitHubHTTPError("Invalid JSON response", status_code=response.status_code) from e

        if not isinstance(payload, dict):
            raise GitHubHTTPError("Invalid JSON response", status_code=response.status_code)

        if "errors" in payload:
            errors = payload["errors"] or []
            if not isinstance(errors, list):
                errors = [errors]
            message = _error_message(errors[0]) if errors else "Unknown error"
            logger.error("GraphQL query returned %d error(s): %s", len(errors), message)
            raise GitHubGraphQLError(message, errors)

        return payload.get("data") or {}

    def fetch_pull_requests(
        self,
        query_string: str,
        on_page: Callable[[int], None] | None = None,
    ) -> list[PullRequestNode]:
        """Get all pull requests matching a search string.

        Follows ``pageInfo.endCursor`` until ``hasNextPage`` is false.

        Args:
        ----
            query_string: Issue-search string
            on_page: Called after each page with that page's node count

        Returns:
        -------
            List of all pull requests, in page order

        """
        all_results: list[PullRequestNode] = []
        after = None
        page = 1

        while True:
            data = self.execute(SEARCH_PULL_REQUESTS_QUERY, {"queryString": query_string, "after": after})
            search = data.get("search") or {}
            nodes = search.get("nodes") or []
            logger.debug("Page %d (after=%s) returned %d nodes", page, after, len(nodes))

            if on_page is not None:
                on_page(len(nodes))

            for node in nodes:
                # Non-PR results come back as empty fragments
                if not node or "number" not in node:
                    logger.debug("Skipping non pull request search node")
                    continue
                pr = PullRequestNode.from_graphql(node)
                logger.debug("Pull request: %s", pr.to_dict())
                all_results.append(pr)

            page_info = search.get("pageInfo") or {}
            if not page_info.get("hasNextPage"):
                break

            after = page_info.get("endCursor")
            page += 1

        logger.info("Fetched %d pull requests in %d page(s)", len(all_results), page)
        return all_results
