"""Issue-tracker port implementation backed by the GitHub issues API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from tweakcompat.domain.model import MergeEffect

from .translator import parse_issue

if TYPE_CHECKING:
    from tweakcompat.domain.model import Issue, RunMode

    from .client import GitHubClient

log = getLogger(__name__)

BYPASS_LABEL: Final = "bypass"
INVALID_LABEL: Final = "invalid"
SUBMISSION_LABEL: Final = "user-submission"


@dataclass(slots=True)
class GitHubIssueTracker:
    client: GitHubClient

    def fetch_issues(self, mode: RunMode) -> list[Issue]:
        """List issues for ``mode`` in processing order, without ``bypass``-labelled ones."""

        payloads = self.client.list_issues(state=mode.issue_state, direction=mode.sort_direction)
        issues = [
            parse_issue(payload) for payload in payloads if not payload.has_label(BYPASS_LABEL)
        ]
        log.info("%s issue(s) to consider after excluding '%s'", len(issues), BYPASS_LABEL)
        return issues

    def mark_invalid(self, issue_number: int) -> None:
        # Replacing the labels with "bypass" keeps the issue out of later rebuilds.
        log.info("Closing issue #%s as invalid", issue_number)
        self.client.edit_issue(
            issue_number,
            state="closed",
            labels=(BYPASS_LABEL, INVALID_LABEL),
        )

    def report_merge(self, issue_number: int, effect: MergeEffect) -> None:
        self.client.add_labels(issue_number, (SUBMISSION_LABEL, effect.value))
        if effect is MergeEffect.DUPLICATE:
            log.info("Closing duplicate issue #%s", issue_number)
            self.client.edit_issue(issue_number, state="closed")
