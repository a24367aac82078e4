"""Command-line interface for GitHub PR Comments."""

import sys
from pathlib import Path

import click

from github_pr_comments import __version__
from github_pr_comments.config import SearchParameters, get_settings, resolve_parameters
from github_pr_comments.exceptions import ConfigError, GitHubAPIError
from github_pr_comments.github import GitHubGraphQLClient, build_search_query
from github_pr_comments.services import CommentCollector, render_console, write_reports
from github_pr_comments.utils import get_logger, setup_logging

logger = get_logger(__name__)


def _progress_line(params: SearchParameters, count: int) -> str:
    """Per-page progress line; count is that page's result count only."""
    if params.merged_since is not None:
        return (
            f"Found {count} PRs merged since {params.merged_since.isoformat()} "
            f"in {params.full_name} with milestone '{params.milestone}':"
        )
    return f"Found {count} PRs in {params.full_name} with milestone '{params.milestone}':"


@click.command(name="github-pr-comments")
@click.version_option(version=__version__, prog_name="github-pr-comments")
@click.option("--token", default=None, help="GitHub token.")
@click.option("--owner", default=None, help="GitHub owner.")
@click.option("--repo", default=None, help="GitHub repository.")
@click.option("--base", default=None, help="PR base branch.")
@click.option("--milestone", default=None, help="PR milestone.")
@click.option("--keyword", "keywords", multiple=True, help="Filter keyword, repeatable.")
@click.option("--merged-since", default=None, help="Date filter for merged PRs (YYYY-MM-DD).")
def main(
    token: str | None,
    owner: str | None,
    repo: str | None,
    base: str | None,
    milestone: str | None,
    keywords: tuple[str, ...],
    merged_since: str | None,
):
    """Fetch merged PR comments by milestone and filter them by keyword."""
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        params = resolve_parameters(
            {
                "token": token,
                "owner": owner,
                "repo": repo,
                "base": base,
                "milestone": milestone,
                "keywords": keywords,
                "merged_since": merged_since,
            },
            settings,
        )
    except ConfigError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    query_string = build_search_query(params)
    logger.debug("Search query: %s", query_string)

    try:
        with GitHubGraphQLClient(params.token, settings.github_graphql_url) as client:
            pull_requests = client.fetch_pull_requests(
                query_string,
                on_page=lambda count: click.echo(_progress_line(params, count)),
            )
    except GitHubAPIError as e:
        click.echo(f"Error fetching data: {e}", err=True)
        sys.exit(1)

    collector = CommentCollector(params.keywords)
    collector.add_pull_requests(pull_requests)
    items = collector.items()

    for line in render_console(items):
        click.echo(line)

    write_reports(items, Path.cwd())


if __name__ == "__main__":
    main()
