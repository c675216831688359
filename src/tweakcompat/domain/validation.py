"""Field-level validation of decoded submissions.

Each required field maps to a predicate returning an error message or ``None``.
Fields not listed here are tolerated and ignored.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final
from urllib.parse import urlsplit

IOS_VERSION_PATTERN: Final = re.compile(r"\A[0-9][0-9.]*\Z")
DEVICE_ID_PATTERN: Final = re.compile(r"\|iPad$|\|iPhone$")
SUBMITTED_STATUSES: Final = frozenset({"not working", "working", "partial"})

type FieldRule = Callable[[object], str | None]


@dataclass(frozen=True, slots=True)
class FieldViolation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _required_string(value: object) -> str | None:
    if value is None:
        return "is required"
    if not isinstance(value, str):
        return "must be a string"
    if not value:
        return "must not be empty"
    return None


def _string_allow_empty(value: object) -> str | None:
    if value is None:
        return "is required"
    if not isinstance(value, str):
        return "must be a string"
    return None


def _matching(pattern: re.Pattern[str], description: str) -> FieldRule:
    def rule(value: object) -> str | None:
        error = _required_string(value)
        if error is not None:
            return error
        if pattern.search(str(value)) is None:
            return f"must match {description}"
        return None

    return rule


def _uri(value: object) -> str | None:
    error = _required_string(value)
    if error is not None:
        return error
    parts = urlsplit(str(value))
    if not parts.scheme or not (parts.netloc or parts.path):
        return "must be a valid URI"
    return None


def _submitted_status(value: object) -> str | None:
    error = _required_string(value)
    if error is not None:
        return error
    if value not in SUBMITTED_STATUSES:
        allowed = ", ".join(sorted(SUBMITTED_STATUSES))
        return f"must be one of: {allowed}"
    return None


FIELD_RULES: Final[Mapping[str, FieldRule]] = {
    "author": _required_string,
    "iOSVersion": _matching(IOS_VERSION_PATTERN, "a dotted numeric version"),
    "url": _uri,
    "latest": _required_string,
    "name": _required_string,
    "packageName": _required_string,
    "id": _required_string,
    "packageId": _required_string,
    "repository": _required_string,
    "deviceId": _matching(DEVICE_ID_PATTERN, "'<id>|iPhone' or '<id>|iPad'"),
    "userNotes": _string_allow_empty,
    "userChosenStatus": _submitted_status,
}


def validate_change(candidate: Mapping[str, object]) -> list[FieldViolation]:
    """Return every rule violated by ``candidate``; an empty list means valid."""

    violations: list[FieldViolation] = []
    for name, rule in FIELD_RULES.items():
        message = rule(candidate.get(name))
        if message is not None:
            violations.append(FieldViolation(name, message))
    return violations


def is_valid_change(candidate: Mapping[str, object]) -> bool:
    return not validate_change(candidate)
