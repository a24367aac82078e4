"""
Application configuration management
"""

from datetime import date, datetime
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError, InvalidDateError

DEFAULT_BASE = "6.0-dev"
DEFAULT_MILESTONE = "Joomla! 6.0.0"
DATE_FORMAT = "%Y-%m-%d"


class Settings(BaseSettings):
    """Application settings"""

    # GitHub API Configuration
    github_token: str | None = None
    github_graphql_url: str = "https://api.github.com/graphql"

    # Search defaults
    github_owner: str | None = None
    github_repo: str | None = None
    github_base: str | None = None
    github_milestone: str | None = None
    github_keywords: str | None = None

    # Application Configuration
    app_name: str = "github-pr-comments"
    app_version: str = "1.0.0"

    # Logging Configuration
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_github_headers(token: str | None) -> dict:
    """Get GitHub GraphQL headers with authentication"""
    settings = get_settings()
    headers = {
        "User-Agent": f"{settings.app_name}/{settings.app_version}",
        "Content-Type": "application/json",
    }
    if token:
        headers["Authorization"] = f"bearer {token}"
    return headers


class SearchParameters(BaseModel):
    """Resolved, immutable parameters of a single run."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    base: str = DEFAULT_BASE
    milestone: str = DEFAULT_MILESTONE
    merged_since: date | None = None
    keywords: tuple[str, ...] = ()
    token: str | None = Field(default=None, repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_merged_since(value: str | None) -> date | None:
    """
    Parse a --merged-since value.

    The value must be a real calendar date written as YYYY-MM-DD and must
    format back to the exact same string.

    Raises:
        InvalidDateError: if the value does not round-trip
    """
    if not value:
        return None
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(value) from e
    if parsed.isoformat() != value:
        raise InvalidDateError(value)
    return parsed


def split_keywords(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated keyword list, trimming each entry."""
    if not value:
        return ()
    return tuple(keyword.strip() for keyword in value.split(","))


def resolve_parameters(options: dict[str, Any], settings: Settings) -> SearchParameters:
    """
    Resolve search parameters from command-line options and settings.

    An explicit option wins over the environment value, which wins over the
    hardcoded default. Keywords come from the repeated option if any were
    given, otherwise from the comma-separated environment value.

    Args:
        options: Parsed command-line options, ``None`` meaning "not given"
        settings: Environment-backed settings

    Returns:
        Immutable search parameters

    Raises:
        InvalidDateError: if merged_since is malformed
        ConfigError: if owner or repository is missing
    """
    merged_since = parse_merged_since(options.get("merged_since"))

    def pick(name: str, env_value: str | None, default: str | None = None) -> str | None:
        value = options.get(name)
        if value is not None:
            return value
        if env_value is not None:
            return env_value
        return default

    owner = pick("owner", settings.github_owner)
    repo = pick("repo", settings.github_repo)
    if not owner:
        raise ConfigError("Missing GitHub owner. Use --owner or set GITHUB_OWNER.")
    if not repo:
        raise ConfigError("Missing GitHub repository. Use --repo or set GITHUB_REPO.")

    cli_keywords = options.get("keywords") or ()
    keywords = tuple(cli_keywords) if cli_keywords else split_keywords(settings.github_keywords)

    return SearchParameters(
        owner=owner,
        repo=repo,
        base=pick("base", settings.github_base, DEFAULT_BASE),
        milestone=pick("milestone", settings.github_milestone, DEFAULT_MILESTONE),
        merged_since=merged_since,
        keywords=keywords,
        token=pick("token", settings.github_token),
    )
