"""Reconcile one change record into the catalog.

``merge_change`` is pure: it returns the resulting catalog alongside the kind of
effect the change had, and never touches the catalog it was given. Lookups go
package id → OS version → ``(user_name, device_id)``; the first level that has
no match is where the change is inserted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from tweakcompat.domain.model import MergeEffect, Package, Review, Version

if TYPE_CHECKING:
    from tweakcompat.domain.model import Catalog, ChangeRecord

log = getLogger(__name__)


class MergeError(RuntimeError):
    """Raised when a change cannot be merged into the catalog."""


class InvalidPackageIdError(MergeError):
    """Raised when a change would create a package without an identifier."""

    def __init__(self, change: ChangeRecord) -> None:
        super().__init__(
            f"Bad package id {change.package_id!r} in issue #{change.issue_number}"
        )
        self.change = change


@dataclass(frozen=True, slots=True)
class MergeResult:
    catalog: Catalog
    effect: MergeEffect


def review_from_change(change: ChangeRecord) -> Review:
    return Review(
        user_name=change.user_name,
        device_id=change.device_id,
        device=change.review_device,
        status=change.status,
        notes=change.user_notes,
        date=change.date,
        issue_number=change.issue_number,
    )


def version_from_change(change: ChangeRecord) -> Version:
    return Version(
        ios_version=change.ios_version,
        tweak_version=change.latest,
        reviews=(review_from_change(change),),
    )


def package_from_change(change: ChangeRecord) -> Package:
    package_id = change.package_id.strip()
    if not package_id:
        raise InvalidPackageIdError(change)
    return Package(
        id=package_id,
        name=change.name,
        latest=change.latest,
        short_description=change.short_description,
        repository=change.repository,
        url=change.url,
        author=change.author,
        package_name=change.package_name,
        versions=(version_from_change(change),),
    )


def _with_package_info(package: Package, change: ChangeRecord) -> Package:
    # Last submission wins: no authorship or timestamp check on package metadata.
    return replace(
        package,
        name=change.name or package.name,
        latest=change.latest,
        short_description=change.depiction or change.short_description,
    )


def merge_change(catalog: Catalog, change: ChangeRecord) -> MergeResult:
    """Apply ``change`` to ``catalog`` and classify what it did."""

    # Lookup and creation use the same stripped id.
    change = replace(change, package_id=change.package_id.strip())
    package = catalog.package_for(change.package_id)
    if package is None:
        created = package_from_change(change)
        log.info("New package creation: %s", created.id)
        return MergeResult(catalog.with_package(created), MergeEffect.NEW_PACKAGE)

    log.info("Editing package: %s", package.id)
    package = _with_package_info(package, change)

    version = package.version_for(change.ios_version)
    if version is None:
        log.info("Creating new version %s for %s", change.ios_version, package.id)
        package = package.with_version(version_from_change(change))
        return MergeResult(catalog.with_package(package), MergeEffect.NEW_VERSION)

    if version.review_for(change.user_name, change.device_id) is not None:
        log.info("Review by %s on %s already in catalog", change.user_name, change.device_id)
        return MergeResult(catalog, MergeEffect.DUPLICATE)

    log.info("Adding review to version %s of %s", version.ios_version, package.id)
    package = package.with_version(version.with_review(review_from_change(change)))
    return MergeResult(catalog.with_package(package), MergeEffect.NEW_REVIEW)
