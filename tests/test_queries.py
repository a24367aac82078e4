"""Unit tests for search query construction."""

from datetime import date

from github_pr_comments.config import SearchParameters
from github_pr_comments.github.queries import SEARCH_PULL_REQUESTS_QUERY, build_search_query


def test_build_search_query() -> None:
    params = SearchParameters(owner="joomla", repo="joomla-cms")

    assert build_search_query(params) == (
        'repo:joomla/joomla-cms is:pr is:merged base:6.0-dev milestone:"Joomla! 6.0.0"'
    )


def test_build_search_query_merged_since() -> None:
    params = SearchParameters(owner="joomla", repo="joomla-cms", base="5.4-dev", milestone="5.4", merged_since=date(2024, 2, 29))

    query = build_search_query(params)

    assert query.startswith('repo:joomla/joomla-cms is:pr is:merged base:5.4-dev milestone:"5.4"')
    assert query.endswith(" merged:>=2024-02-29")


def test_search_document_shape() -> None:
    assert "$queryString: String!" in SEARCH_PULL_REQUESTS_QUERY
    assert "$after: String" in SEARCH_PULL_REQUESTS_QUERY
    assert "last: 100" in SEARCH_PULL_REQUESTS_QUERY
    assert "pageInfo { hasNextPage, endCursor }" in SEARCH_PULL_REQUESTS_QUERY
    assert "comments(last: 100)" in SEARCH_PULL_REQUESTS_QUERY
