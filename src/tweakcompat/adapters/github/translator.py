"""Translate GitHub issue payloads into domain issues."""

from __future__ import annotations

from collections.abc import Mapping

from tweakcompat.domain.model import Issue

from .schema import IssuePayload

type IssuePayloadInput = IssuePayload | Mapping[str, object]


def parse_issue(payload: IssuePayloadInput) -> Issue:
    model = payload if isinstance(payload, IssuePayload) else IssuePayload.model_validate(payload)
    return Issue(
        id=model.id,
        number=model.number,
        title=model.title,
        body=model.body or "",
        created_at=model.created_at,
        author=model.user.login,
        labels=model.label_names,
    )
