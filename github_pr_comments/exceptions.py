"""Custom exceptions for GitHub PR Comments."""


class GitHubCommentsError(Exception):
    """Base exception for all GitHub PR Comments errors."""


class ConfigError(GitHubCommentsError):
    """Configuration-related errors."""


class InvalidDateError(ConfigError):
    """Raised when --merged-since is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Invalid date format for --merged-since. Please use YYYY-MM-DD.")


class GitHubAPIError(GitHubCommentsError):
    """Errors reported while talking to the GitHub API."""


class GitHubHTTPError(GitHubAPIError):
    """Non-success HTTP status or transport failure."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason)


class GitHubGraphQLError(GitHubAPIError):
    """GraphQL payload carrying an ``errors`` array."""

    def __init__(self, message: str, errors: list | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)
