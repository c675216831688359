"""Decode compatibility reports embedded in tracker issue bodies.

A submission body is a fenced JSON block written by the on-device reporter::

    ```
    {"base64": "<payload>", "notes": "...", "chosenStatus": "working", ...}
    ```

The ``base64`` field holds the package/device details as another JSON document.
Anything that does not follow this shape is skipped rather than reported.
"""

from __future__ import annotations

import base64
import binascii
import json
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tweakcompat.domain.model import CandidateChange, Issue

log = getLogger(__name__)

FENCE = "```"
SUBMISSION_MARKER = "packageStatusExplaination"


def is_submission_body(body: str) -> bool:
    return body[: len(FENCE)] == FENCE and SUBMISSION_MARKER in body


def _parse_json_object(text: str) -> dict[str, object] | None:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def _decode_payload(encoded: object) -> dict[str, object] | None:
    if not isinstance(encoded, str):
        return None
    try:
        raw = base64.b64decode(encoded)
        text = raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return None
    return _parse_json_object(text)


def parse_submission(issue: Issue) -> CandidateChange | None:
    """Return the candidate change carried by ``issue``, or ``None`` when it has none."""

    if not is_submission_body(issue.body):
        return None

    envelope = _parse_json_object(issue.body.replace(FENCE, ""))
    if envelope is None:
        log.debug("Issue #%s: submission envelope is not valid JSON", issue.number)
        return None

    candidate = _decode_payload(envelope.get("base64"))
    if candidate is None:
        log.debug("Issue #%s: submission payload could not be decoded", issue.number)
        return None

    candidate["issueId"] = issue.id
    candidate["issueNumber"] = issue.number
    candidate["date"] = issue.created_at
    candidate["issueTitle"] = issue.title
    candidate["userNotes"] = envelope.get("notes")
    candidate["userChosenStatus"] = envelope.get("chosenStatus")
    candidate["userName"] = issue.author
    return candidate


def parse_submissions(issues: Iterable[Issue]) -> list[CandidateChange]:
    """Parse an ordered batch of issues, keeping order and dropping non-submissions."""

    candidates: list[CandidateChange] = []
    skipped = 0
    for issue in issues:
        candidate = parse_submission(issue)
        if candidate is None:
            skipped += 1
            continue
        candidates.append(candidate)
    if skipped:
        log.info("Skipped %s issue(s) without a decodable submission", skipped)
    return candidates
