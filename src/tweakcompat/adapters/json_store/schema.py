"""Pydantic models describing the persisted tweak list and published documents.

Field names follow the JSON documents (camelCase); Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tweakcompat.domain.model import CalculatedStatus, ReviewStatus


class DocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OutcomeDocument(DocumentModel):
    total: int = 0
    good: int = 0
    bad: int = 0
    percentage: int = 0
    calculated_status: CalculatedStatus = Field(
        default=CalculatedStatus.UNKNOWN, alias="calculatedStatus"
    )


class VersionOutcomeDocument(OutcomeDocument):
    arch32: OutcomeDocument = Field(default_factory=OutcomeDocument)


class ReviewDocument(DocumentModel):
    user_name: str = Field(alias="userName")
    device_id: str = Field(alias="deviceId")
    device: str = ""
    status: ReviewStatus
    user_notes: str = Field(default="", alias="userNotes")
    date: str | None = None
    issue_number: int | None = Field(default=None, alias="issueNumber")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: object) -> object:
        if isinstance(value, str):
            return ReviewStatus.from_submission(value)
        return value


class VersionSummaryDocument(DocumentModel):
    tweak_version: str = Field(default="", alias="tweakVersion")
    ios_version: str = Field(alias="iOSVersion")
    outcome: VersionOutcomeDocument = Field(default_factory=VersionOutcomeDocument)


class VersionDocument(VersionSummaryDocument):
    users: list[ReviewDocument] = Field(default_factory=list)


class PackageFields(DocumentModel):
    id: str
    name: str
    latest: str = ""
    short_description: str = Field(default="", alias="shortDescription")
    repository: str = ""
    url: str = ""
    author: str = ""
    package_name: str = Field(default="", alias="packageName")


class PackageDocument(PackageFields):
    versions: list[VersionDocument] = Field(default_factory=list)


class PackageSummaryDocument(PackageFields):
    versions: list[VersionSummaryDocument] = Field(default_factory=list)


class DeviceDocument(DocumentModel):
    device_id: str = Field(alias="deviceId")
    device_name: str = Field(default="", alias="deviceName")
    arch32bit: bool = False


class TweakListDocument(DocumentModel):
    packages: list[PackageDocument] = Field(default_factory=list)
    devices: list[DeviceDocument] = Field(default_factory=list)
    ios_versions: list[str] = Field(default_factory=list, alias="iOSVersions")


class IosVersionDocument(DocumentModel):
    packages: list[PackageSummaryDocument] = Field(default_factory=list)
