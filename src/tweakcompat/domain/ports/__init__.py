"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import CatalogStore
from .tracking import IssueSource, IssueTracker, SubmissionFeedback

__all__ = [
    "CatalogStore",
    "IssueSource",
    "IssueTracker",
    "SubmissionFeedback",
]
