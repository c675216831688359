"""Catalog aggregates: packages, versions, reviews and their derived outcomes.

All entities are frozen. Reconciliation produces new values through
``dataclasses.replace`` instead of mutating shared structures, so a catalog
handed to the merger or aggregator is never modified in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .enums import CalculatedStatus, ReviewStatus

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True, kw_only=True)
class Outcome:
    """Aggregate verdict over a set of reviews."""

    total: int = 0
    good: int = 0
    bad: int = 0
    percentage: int = 0
    calculated_status: CalculatedStatus = CalculatedStatus.UNKNOWN


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionOutcome(Outcome):
    """Overall outcome of a version plus the 32-bit device sub-aggregate."""

    arch32: Outcome = field(default_factory=Outcome)


@dataclass(frozen=True, slots=True, kw_only=True)
class Device:
    device_id: str
    device_name: str = ""
    arch32bit: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Review:
    """One user's report for one device, identified by ``(user_name, device_id)``."""

    user_name: str
    device_id: str
    device: str
    status: ReviewStatus
    notes: str = ""
    date: str | None = None
    issue_number: int | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.user_name, self.device_id)


@dataclass(frozen=True, slots=True, kw_only=True)
class Version:
    ios_version: str
    tweak_version: str
    reviews: tuple[Review, ...] = ()
    outcome: VersionOutcome = field(default_factory=VersionOutcome)

    def review_for(self, user_name: str, device_id: str) -> Review | None:
        for review in self.reviews:
            if review.key == (user_name, device_id):
                return review
        return None

    def with_review(self, review: Review) -> Version:
        return replace(self, reviews=(*self.reviews, review))


@dataclass(frozen=True, slots=True, kw_only=True)
class Package:
    id: str
    name: str
    latest: str
    short_description: str = ""
    repository: str = ""
    url: str = ""
    author: str = ""
    package_name: str = ""
    versions: tuple[Version, ...] = ()

    def version_for(self, ios_version: str) -> Version | None:
        for version in self.versions:
            if version.ios_version == ios_version:
                return version
        return None

    def with_version(self, version: Version) -> Package:
        """Return a copy holding ``version``, replacing the one with the same OS version."""
        versions = list(self.versions)
        for index, existing in enumerate(versions):
            if existing.ios_version == version.ios_version:
                versions[index] = version
                break
        else:
            versions.append(version)
        return replace(self, versions=tuple(versions))


@dataclass(frozen=True, slots=True, kw_only=True)
class Catalog:
    """The persisted "tweak list": packages, the device table and known OS versions."""

    packages: tuple[Package, ...] = ()
    devices: tuple[Device, ...] = ()
    ios_versions: tuple[str, ...] = ()

    def package_for(self, package_id: str) -> Package | None:
        for package in self.packages:
            if package.id == package_id:
                return package
        return None

    def with_package(self, package: Package) -> Catalog:
        """Return a copy holding ``package``, replacing the one with the same id."""
        packages = list(self.packages)
        for index, existing in enumerate(packages):
            if existing.id == package.id:
                packages[index] = package
                break
        else:
            packages.append(package)
        return replace(self, packages=tuple(packages))

    def device_table(self) -> Mapping[str, Device]:
        return {device.device_id: device for device in self.devices}
