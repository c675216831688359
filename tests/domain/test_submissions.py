from __future__ import annotations

import base64
import json

import pytest

from tests.helpers.submissions import make_issue, make_issue_body, make_payload
from tweakcompat.domain.submissions import parse_submission, parse_submissions


def test_parse_submission_decodes_payload_and_stamps_issue_metadata() -> None:
    issue = make_issue(
        7,
        body=make_issue_body(notes="Works fine", chosen_status="partial"),
        author="octocat",
        title="Acme Tweak partial",
        created_at="2021-01-02T03:04:05Z",
    )

    candidate = parse_submission(issue)

    assert candidate is not None
    assert candidate["packageId"] == "com.acme.tweak"
    assert candidate["iOSVersion"] == "14.0"
    assert candidate["issueId"] == issue.id
    assert candidate["issueNumber"] == 7
    assert candidate["date"] == "2021-01-02T03:04:05Z"
    assert candidate["issueTitle"] == "Acme Tweak partial"
    assert candidate["userNotes"] == "Works fine"
    assert candidate["userChosenStatus"] == "partial"
    assert candidate["userName"] == "octocat"


def test_parse_submission_overrides_payload_fields_with_issue_metadata() -> None:
    payload = make_payload(userName="spoofed", issueNumber=999)

    candidate = parse_submission(make_issue(3, body=make_issue_body(payload), author="real"))

    assert candidate is not None
    assert candidate["userName"] == "real"
    assert candidate["issueNumber"] == 3


@pytest.mark.parametrize(
    "body",
    [
        "",
        "I think Acme Tweak is broken",
        '{"packageStatusExplaination": "missing fence"}',
        "```\nno marker in here\n```",
        " ```packageStatusExplaination```",
    ],
)
def test_parse_submission_skips_ineligible_bodies(body: str) -> None:
    assert parse_submission(make_issue(body=body)) is None


def test_parse_submission_skips_broken_envelope_json() -> None:
    body = "```\n{packageStatusExplaination: not json\n```"

    assert parse_submission(make_issue(body=body)) is None


def test_parse_submission_skips_undecodable_payload() -> None:
    encoded = base64.b64encode(b"\xff\xfe not utf-8").decode()
    envelope = {"packageStatusExplaination": "x", "base64": encoded}
    body = f"```{json.dumps(envelope)}```"

    assert parse_submission(make_issue(body=body)) is None


def test_parse_submission_skips_payload_that_is_not_a_json_object() -> None:
    encoded = base64.b64encode(b"[1, 2, 3]").decode()
    envelope = {"packageStatusExplaination": "x", "base64": encoded}
    body = f"```{json.dumps(envelope)}```"

    assert parse_submission(make_issue(body=body)) is None


def test_parse_submissions_preserves_order_and_drops_non_submissions() -> None:
    issues = [
        make_issue(1),
        make_issue(2, body="just a question"),
        make_issue(3),
    ]

    candidates = parse_submissions(issues)

    assert [candidate["issueNumber"] for candidate in candidates] == [1, 3]
