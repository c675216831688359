"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal


class ReviewStatus(StrEnum):
    """Verdict a reviewer reported for a package on one device."""

    WORKING = "working"
    PARTIAL = "partial"
    NOT_WORKING = "notworking"

    @classmethod
    def from_submission(cls, value: str) -> ReviewStatus:
        """Map a submitted ``chosenStatus`` (``"not working"`` etc.) onto a verdict."""
        normalized = value.strip().lower().replace(" ", "")
        return cls(normalized)

    @property
    def is_good(self) -> bool:
        return self in (ReviewStatus.WORKING, ReviewStatus.PARTIAL)

    @property
    def is_bad(self) -> bool:
        return self is ReviewStatus.NOT_WORKING


class CalculatedStatus(StrEnum):
    UNKNOWN = "Unknown"
    NOT_WORKING = "Not working"
    LIKELY_WORKING = "Likely working"
    WORKING = "Working"


class MergeEffect(StrEnum):
    """How a merged change affected the catalog; doubles as the issue label."""

    NEW_PACKAGE = "new-package"
    NEW_VERSION = "new-version"
    NEW_REVIEW = "new-review"
    DUPLICATE = "duplicate"


IssueState = Literal["open", "closed"]
SortDirection = Literal["asc", "desc"]


class RunMode(StrEnum):
    """Operating mode of a pipeline run.

    ``process`` handles newly opened issues, newest first, and reports back to the
    tracker. ``rebuild`` wipes the catalog and replays every closed issue, oldest
    first, without touching the tracker.
    """

    PROCESS = "process"
    REBUILD = "rebuild"

    @property
    def issue_state(self) -> IssueState:
        return "closed" if self is RunMode.REBUILD else "open"

    @property
    def sort_direction(self) -> SortDirection:
        return "asc" if self is RunMode.REBUILD else "desc"

    @property
    def wipes_catalog(self) -> bool:
        return self is RunMode.REBUILD

    @property
    def sends_feedback(self) -> bool:
        return self is RunMode.PROCESS
