"""GraphQL documents and search strings for the GitHub API.

The document is kept here, apart from the client, so it reads as plain
GraphQL.
"""

from ..config import SearchParameters

# Merged PRs matching a search string, newest 100 comments each
SEARCH_PULL_REQUESTS_QUERY = """query($queryString: String!, $after: String) {
  search(query: $queryString, type: ISSUE, last: 100, after: $after) {
    pageInfo { hasNextPage, endCursor }
    nodes {
      ... on PullRequest {
        number
        title
        milestone { title }
        comments(last: 100) {
          nodes {
            author { login }
            body
            createdAt
          }
        }
      }
    }
  }
}"""


def build_search_query(params: SearchParameters) -> str:
    """Build the issue-search string for merged PRs of a milestone.

    Args:
    ----
        params: Resolved search parameters

    Returns:
    -------
        Search string, e.g.
        ``repo:joomla/joomla-cms is:pr is:merged base:6.0-dev milestone:"Joomla! 6.0.0"``

    """
    query = f'repo:{params.owner}/{params.repo} is:pr is:merged base:{params.base} milestone:"{params.milestone}"'
    if params.merged_since is not None:
        query += f" merged:>={params.merged_since.isoformat()}"
    return query
