"""GitHub issue-tracker configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

GITHUB_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_TIMEOUT_SECONDS = 30.0
DEFAULT_GITHUB_OWNER = "jlippold"
DEFAULT_GITHUB_REPO = "tweakCompatible"
DEFAULT_ISSUES_PER_PAGE = 100


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds the GitHub API token, target repository and client settings."""

    token: str
    owner: str
    repo: str
    resilience: ResilienceConfig
    per_page: int = DEFAULT_ISSUES_PER_PAGE

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"


def github_resilience(token: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="github",
        base_url=GITHUB_BASE_URL,
        timeout_seconds=GITHUB_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        },
    )


def get_github_config(*, resilience: ResilienceConfig | None = None) -> GitHubConfig:
    values = require_env_vars(("GITHUB_API_TOKEN",))
    token = values["GITHUB_API_TOKEN"]
    return GitHubConfig(
        token=token,
        owner=optional_env_var("TWEAKCOMPAT_GITHUB_OWNER", DEFAULT_GITHUB_OWNER),
        repo=optional_env_var("TWEAKCOMPAT_GITHUB_REPO", DEFAULT_GITHUB_REPO),
        resilience=resilience or github_resilience(token),
    )
