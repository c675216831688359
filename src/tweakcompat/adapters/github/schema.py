"""Pydantic models describing the GitHub REST issue payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class UserPayload(GitHubBaseModel):
    login: str


class LabelPayload(GitHubBaseModel):
    name: str


class IssuePayload(GitHubBaseModel):
    id: int
    number: int
    title: str
    body: str | None = None
    state: str = "open"
    created_at: str
    user: UserPayload
    labels: list[LabelPayload] = Field(default_factory=list)

    @property
    def label_names(self) -> tuple[str, ...]:
        return tuple(label.name for label in self.labels)

    def has_label(self, name: str) -> bool:
        return name in self.label_names


class ErrorResponse(GitHubBaseModel):
    message: str
    documentation_url: str | None = None


IssueListAdapter = TypeAdapter(list[IssuePayload])
