"""HTTP client for the GitHub issues API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Literal

import httpx

from tweakcompat.adapters.http_resilience import ResilientClient

from .schema import ErrorResponse, IssueListAdapter, IssuePayload

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tweakcompat.config.github import GitHubConfig
    from tweakcompat.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

IssueState = Literal["open", "closed", "all"]
SortDirection = Literal["asc", "desc"]


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API returns an unexpected or error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubClient:
    """Low-level client for listing and editing issues of one repository."""

    def __init__(
        self,
        *,
        config: GitHubConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def list_issues(
        self,
        *,
        state: IssueState,
        direction: SortDirection,
    ) -> list[IssuePayload]:
        return asyncio.run(self._list_issues_async(state=state, direction=direction))

    def add_labels(self, number: int, labels: Sequence[str]) -> None:
        asyncio.run(self._add_labels_async(number, labels))

    def edit_issue(
        self,
        number: int,
        *,
        state: IssueState | None = None,
        labels: Sequence[str] | None = None,
    ) -> None:
        asyncio.run(self._edit_issue_async(number, state=state, labels=labels))

    async def _list_issues_async(
        self,
        *,
        state: IssueState,
        direction: SortDirection,
    ) -> list[IssuePayload]:
        issues: list[IssuePayload] = []
        page = 1
        async with self._client_factory(self._resilience) as client:
            while True:
                params = {
                    "state": state,
                    "sort": "created",
                    "direction": direction,
                    "per_page": str(self._config.per_page),
                    "page": str(page),
                }
                response = await client.get(f"{self._config.repo_path}/issues", params=params)
                _raise_for_error(response)
                payload = response.json()
                if not isinstance(payload, list):
                    raise GitHubAPIError("Unexpected GitHub issue listing payload")
                issues.extend(IssueListAdapter.validate_python(payload))

                if "next" not in response.links:
                    break
                page += 1

        log.info("Fetched %s %s issue(s) over %s page(s)", len(issues), state, page)
        return issues

    async def _add_labels_async(self, number: int, labels: Sequence[str]) -> None:
        async with self._client_factory(self._resilience) as client:
            response = await client.post(
                f"{self._config.repo_path}/issues/{number}/labels",
                json={"labels": list(labels)},
            )
            _raise_for_error(response)

    async def _edit_issue_async(
        self,
        number: int,
        *,
        state: IssueState | None,
        labels: Sequence[str] | None,
    ) -> None:
        body: dict[str, object] = {}
        if state is not None:
            body["state"] = state
        if labels is not None:
            body["labels"] = list(labels)
        if not body:
            return
        async with self._client_factory(self._resilience) as client:
            response = await client.patch(f"{self._config.repo_path}/issues/{number}", json=body)
            _raise_for_error(response)


def _raise_for_error(response: httpx.Response) -> None:
    if response.is_success:
        return
    try:
        error = ErrorResponse.model_validate(response.json())
        message = error.message
    except ValueError:
        message = response.text or response.reason_phrase
    log.error("GitHub API error %s: %s", response.status_code, message)
    raise GitHubAPIError(message, status_code=response.status_code)
