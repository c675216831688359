"""Translate between persisted documents and the domain catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tweakcompat.domain.model import (
    Catalog,
    Device,
    Outcome,
    Package,
    Review,
    Version,
    VersionOutcome,
)

from .schema import (
    DeviceDocument,
    IosVersionDocument,
    OutcomeDocument,
    PackageDocument,
    PackageSummaryDocument,
    ReviewDocument,
    TweakListDocument,
    VersionDocument,
    VersionOutcomeDocument,
    VersionSummaryDocument,
)

if TYPE_CHECKING:
    from tweakcompat.domain.sharding import (
        OsVersionShard,
        PackageSummary,
        VersionSummary,
    )


# -- documents -> domain ----------------------------------------------------


def _outcome(document: OutcomeDocument) -> Outcome:
    return Outcome(
        total=document.total,
        good=document.good,
        bad=document.bad,
        percentage=document.percentage,
        calculated_status=document.calculated_status,
    )


def _version_outcome(document: VersionOutcomeDocument) -> VersionOutcome:
    return VersionOutcome(
        total=document.total,
        good=document.good,
        bad=document.bad,
        percentage=document.percentage,
        calculated_status=document.calculated_status,
        arch32=_outcome(document.arch32),
    )


def _review(document: ReviewDocument) -> Review:
    return Review(
        user_name=document.user_name,
        device_id=document.device_id,
        device=document.device or document.device_id,
        status=document.status,
        notes=document.user_notes,
        date=document.date,
        issue_number=document.issue_number,
    )


def _version(document: VersionDocument) -> Version:
    return Version(
        ios_version=document.ios_version,
        tweak_version=document.tweak_version,
        reviews=tuple(_review(user) for user in document.users),
        outcome=_version_outcome(document.outcome),
    )


def package_from_document(document: PackageDocument) -> Package:
    return Package(
        id=document.id,
        name=document.name,
        latest=document.latest,
        short_description=document.short_description,
        repository=document.repository,
        url=document.url,
        author=document.author,
        package_name=document.package_name,
        versions=tuple(_version(version) for version in document.versions),
    )


def catalog_from_document(document: TweakListDocument) -> Catalog:
    return Catalog(
        packages=tuple(package_from_document(package) for package in document.packages),
        devices=tuple(
            Device(
                device_id=device.device_id,
                device_name=device.device_name,
                arch32bit=device.arch32bit,
            )
            for device in document.devices
        ),
        ios_versions=tuple(document.ios_versions),
    )


# -- domain -> documents ----------------------------------------------------


def _outcome_document(outcome: Outcome) -> OutcomeDocument:
    return OutcomeDocument(
        total=outcome.total,
        good=outcome.good,
        bad=outcome.bad,
        percentage=outcome.percentage,
        calculated_status=outcome.calculated_status,
    )


def _version_outcome_document(outcome: VersionOutcome) -> VersionOutcomeDocument:
    return VersionOutcomeDocument(
        total=outcome.total,
        good=outcome.good,
        bad=outcome.bad,
        percentage=outcome.percentage,
        calculated_status=outcome.calculated_status,
        arch32=_outcome_document(outcome.arch32),
    )


def _review_document(review: Review) -> ReviewDocument:
    return ReviewDocument(
        user_name=review.user_name,
        device_id=review.device_id,
        device=review.device,
        status=review.status,
        user_notes=review.notes,
        date=review.date,
        issue_number=review.issue_number,
    )


def _version_document(version: Version) -> VersionDocument:
    return VersionDocument(
        tweak_version=version.tweak_version,
        ios_version=version.ios_version,
        outcome=_version_outcome_document(version.outcome),
        users=[_review_document(review) for review in version.reviews],
    )


def package_document(package: Package) -> PackageDocument:
    return PackageDocument(
        id=package.id,
        name=package.name,
        latest=package.latest,
        short_description=package.short_description,
        repository=package.repository,
        url=package.url,
        author=package.author,
        package_name=package.package_name,
        versions=[_version_document(version) for version in package.versions],
    )


def catalog_document(catalog: Catalog) -> TweakListDocument:
    return TweakListDocument(
        packages=[package_document(package) for package in catalog.packages],
        devices=[
            DeviceDocument(
                device_id=device.device_id,
                device_name=device.device_name,
                arch32bit=device.arch32bit,
            )
            for device in catalog.devices
        ],
        ios_versions=list(catalog.ios_versions),
    )


def _version_summary_document(summary: VersionSummary) -> VersionSummaryDocument:
    return VersionSummaryDocument(
        tweak_version=summary.tweak_version,
        ios_version=summary.ios_version,
        outcome=_version_outcome_document(summary.outcome),
    )


def _package_summary_document(summary: PackageSummary) -> PackageSummaryDocument:
    return PackageSummaryDocument(
        id=summary.id,
        name=summary.name,
        latest=summary.latest,
        short_description=summary.short_description,
        repository=summary.repository,
        url=summary.url,
        author=summary.author,
        package_name=summary.package_name,
        versions=[_version_summary_document(version) for version in summary.versions],
    )


def ios_version_document(shard: OsVersionShard) -> IosVersionDocument:
    return IosVersionDocument(
        packages=[_package_summary_document(summary) for summary in shard.packages],
    )
