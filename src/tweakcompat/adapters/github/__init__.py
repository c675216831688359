"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubClient
from .schema import IssuePayload
from .tracker import GitHubIssueTracker
from .translator import parse_issue

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "GitHubIssueTracker",
    "IssuePayload",
    "parse_issue",
]
