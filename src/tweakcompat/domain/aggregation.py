"""Recompute derived compatibility outcomes over the whole catalog.

Outcomes are never updated incrementally: every pass rebuilds them from the
review sets and the device table, so running it twice yields the same catalog.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import TYPE_CHECKING

from tweakcompat.domain.model import CalculatedStatus, Outcome, VersionOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tweakcompat.domain.model import Catalog, Device, Package, Review, Version

LIKELY_WORKING_ABOVE = 40
WORKING_ABOVE = 75

_SEGMENT = re.compile(r"(\d*)(.*)")


def calculated_status(total: int, percentage: int) -> CalculatedStatus:
    status = CalculatedStatus.NOT_WORKING
    if total == 0:
        status = CalculatedStatus.UNKNOWN
    if percentage > LIKELY_WORKING_ABOVE:
        status = CalculatedStatus.LIKELY_WORKING
    if percentage > WORKING_ABOVE:
        status = CalculatedStatus.WORKING
    return status


def compute_outcome(reviews: Iterable[Review]) -> Outcome:
    """Tally ``reviews`` into an outcome; an empty set is ``Unknown`` at 0%."""

    statuses = [review.status for review in reviews]
    total = len(statuses)
    good = sum(1 for status in statuses if status.is_good)
    bad = sum(1 for status in statuses if status.is_bad)
    percentage = 0 if total == 0 else (good * 100) // total
    return Outcome(
        total=total,
        good=good,
        bad=bad,
        percentage=percentage,
        calculated_status=calculated_status(total, percentage),
    )


def is_32bit(device_id: str, devices: Mapping[str, Device]) -> bool:
    device = devices.get(device_id)
    return device is not None and device.arch32bit


def compute_version_outcome(
    reviews: Iterable[Review],
    devices: Mapping[str, Device],
) -> VersionOutcome:
    reviews = tuple(reviews)
    overall = compute_outcome(reviews)
    arch32 = compute_outcome(review for review in reviews if is_32bit(review.device, devices))
    return VersionOutcome(
        total=overall.total,
        good=overall.good,
        bad=overall.bad,
        percentage=overall.percentage,
        calculated_status=overall.calculated_status,
        arch32=arch32,
    )


def version_sort_key(version: str) -> tuple[tuple[int, str], ...]:
    """Sort key for dotted versions: numeric segments, trailing zeros ignored."""

    segments: list[tuple[int, str]] = []
    for raw in version.strip().split("."):
        match = _SEGMENT.fullmatch(raw)
        digits, rest = match.groups() if match else ("", raw)
        segments.append((int(digits) if digits else 0, rest))
    while segments and segments[-1] == (0, ""):
        segments.pop()
    return tuple(segments)


def sorted_ios_versions(packages: Iterable[Package]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for package in packages:
        for version in package.versions:
            seen.setdefault(version.ios_version, None)
    return tuple(sorted(seen, key=version_sort_key))


def _recalculate_version(version: Version, devices: Mapping[str, Device]) -> Version:
    return replace(version, outcome=compute_version_outcome(version.reviews, devices))


def _recalculate_package(package: Package, devices: Mapping[str, Device]) -> Package:
    versions = tuple(_recalculate_version(version, devices) for version in package.versions)
    return replace(package, versions=versions)


def aggregate_catalog(catalog: Catalog) -> Catalog:
    """Return ``catalog`` with packages sorted by name and every outcome recomputed."""

    devices = catalog.device_table()
    packages = sorted(catalog.packages, key=lambda package: package.name.lower())
    recalculated = tuple(_recalculate_package(package, devices) for package in packages)
    return replace(
        catalog,
        packages=recalculated,
        ios_versions=sorted_ios_versions(recalculated),
    )
