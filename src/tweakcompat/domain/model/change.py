"""Inbound submissions: tracker issues and the change records decoded from them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .enums import ReviewStatus

type CandidateChange = dict[str, object]
"""Decoded but unvalidated submission payload, keyed by its wire field names."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Issue:
    """Tracker issue as seen by the domain."""

    id: int
    number: int
    title: str
    body: str
    created_at: str
    author: str
    labels: tuple[str, ...] = ()


def _text(candidate: Mapping[str, object], key: str) -> str:
    value = candidate.get(key)
    return value if isinstance(value, str) else ""


def _optional_int(candidate: Mapping[str, object], key: str) -> int | None:
    value = candidate.get(key)
    if isinstance(value, bool):
        return None
    return value if isinstance(value, int) else None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeRecord:
    """A validated submission describing one review of one package version."""

    package_id: str
    name: str
    latest: str
    ios_version: str
    device_id: str
    user_name: str
    status: ReviewStatus
    device: str = ""
    user_notes: str = ""
    short_description: str = ""
    depiction: str = ""
    repository: str = ""
    url: str = ""
    author: str = ""
    package_name: str = ""
    change_id: str = ""
    issue_id: int | None = None
    issue_number: int | None = None
    issue_title: str = ""
    date: str | None = None

    @property
    def review_device(self) -> str:
        """Device identifier used for architecture lookups."""
        return self.device or self.device_id

    @classmethod
    def from_candidate(cls, candidate: Mapping[str, object]) -> ChangeRecord:
        """Build a record from a candidate that already passed validation."""

        return cls(
            package_id=_text(candidate, "packageId").strip(),
            name=_text(candidate, "name"),
            latest=_text(candidate, "latest"),
            ios_version=_text(candidate, "iOSVersion"),
            device_id=_text(candidate, "deviceId"),
            device=_text(candidate, "device"),
            user_name=_text(candidate, "userName"),
            status=ReviewStatus.from_submission(_text(candidate, "userChosenStatus")),
            user_notes=_text(candidate, "userNotes"),
            short_description=_text(candidate, "shortDescription"),
            depiction=_text(candidate, "depiction"),
            repository=_text(candidate, "repository"),
            url=_text(candidate, "url"),
            author=_text(candidate, "author"),
            package_name=_text(candidate, "packageName"),
            change_id=_text(candidate, "id"),
            issue_id=_optional_int(candidate, "issueId"),
            issue_number=_optional_int(candidate, "issueNumber"),
            issue_title=_text(candidate, "issueTitle"),
            date=_text(candidate, "date") or None,
        )
