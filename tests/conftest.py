"""Test configuration and fixtures."""

import logging
from collections.abc import Generator

import pytest

from github_pr_comments.config import Settings, get_settings
from github_pr_comments.utils.logging import PACKAGE_LOGGER

GITHUB_ENV_VARS = [
    "GITHUB_TOKEN",
    "GITHUB_OWNER",
    "GITHUB_REPO",
    "GITHUB_BASE",
    "GITHUB_MILESTONE",
    "GITHUB_KEYWORDS",
    "GITHUB_GRAPHQL_URL",
]

GRAPHQL_URL = "https://api.github.com/graphql"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Run every test without GITHUB_* variables or a stray .env file."""
    for key in GITHUB_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    # The CLI configures the package logger against its own captured stderr
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    """Settings with nothing coming from the environment."""
    return Settings(_env_file=None)


def make_comment(login: str | None, body: str, created_at: str = "2025-01-01T00:00:00Z") -> dict:
    """GraphQL comment node."""
    return {
        "author": {"login": login} if login is not None else None,
        "body": body,
        "createdAt": created_at,
    }


def make_pr(number: int, title: str, comments: list[dict], milestone: str = "Joomla! 6.0.0") -> dict:
    """GraphQL pull request search node."""
    return {
        "number": number,
        "title": title,
        "milestone": {"title": milestone},
        "comments": {"nodes": comments},
    }


def make_page(nodes: list[dict], has_next: bool = False, end_cursor: str | None = None) -> dict:
    """GraphQL search response page."""
    return {
        "data": {
            "search": {
                "pageInfo": {"hasNextPage": has_next, "endCursor": end_cursor},
                "nodes": nodes,
            },
        },
    }
