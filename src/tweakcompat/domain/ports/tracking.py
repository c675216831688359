"""Ports for reading submissions from, and reporting back to, the issue tracker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tweakcompat.domain.model import Issue, MergeEffect, RunMode


@runtime_checkable
class IssueSource(Protocol):
    """Lists the issues a run should consider, in processing order."""

    def fetch_issues(self, mode: RunMode) -> Sequence[Issue]: ...


@runtime_checkable
class SubmissionFeedback(Protocol):
    """Side effects reported back to the tracker for a processed submission."""

    def mark_invalid(self, issue_number: int) -> None: ...

    def report_merge(self, issue_number: int, effect: MergeEffect) -> None: ...


@runtime_checkable
class IssueTracker(IssueSource, SubmissionFeedback, Protocol):
    """Both directions of tracker access, as provided by a single adapter."""
