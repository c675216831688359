"""Project the aggregated catalog into per-package and per-OS-version documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tweakcompat.domain.model import Catalog, Package, Version, VersionOutcome


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionSummary:
    """A version stripped of reviewer detail."""

    ios_version: str
    tweak_version: str
    outcome: VersionOutcome

    @classmethod
    def of(cls, version: Version) -> VersionSummary:
        return cls(
            ios_version=version.ios_version,
            tweak_version=version.tweak_version,
            outcome=version.outcome,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PackageSummary:
    """Shallow copy of a package restricted to the versions of one OS release."""

    id: str
    name: str
    latest: str
    short_description: str
    repository: str
    url: str
    author: str
    package_name: str
    versions: tuple[VersionSummary, ...]


@dataclass(frozen=True, slots=True)
class PackageShard:
    package: Package


@dataclass(frozen=True, slots=True)
class OsVersionShard:
    ios_version: str
    packages: tuple[PackageSummary, ...]


@dataclass(frozen=True, slots=True)
class CatalogShards:
    packages: tuple[PackageShard, ...]
    ios_versions: tuple[OsVersionShard, ...]


def summarize_for_ios(package: Package, ios_version: str) -> PackageSummary | None:
    """Return ``package`` reduced to ``ios_version``, or ``None`` if it has no such version."""

    versions = tuple(
        VersionSummary.of(version)
        for version in package.versions
        if version.ios_version == ios_version
    )
    if not versions:
        return None
    return PackageSummary(
        id=package.id,
        name=package.name,
        latest=package.latest,
        short_description=package.short_description,
        repository=package.repository,
        url=package.url,
        author=package.author,
        package_name=package.package_name,
        versions=versions,
    )


def shard_for_ios(catalog: Catalog, ios_version: str) -> OsVersionShard:
    summaries = (summarize_for_ios(package, ios_version) for package in catalog.packages)
    return OsVersionShard(
        ios_version=ios_version,
        packages=tuple(summary for summary in summaries if summary is not None),
    )


def shard_catalog(catalog: Catalog) -> CatalogShards:
    """Split ``catalog`` into one shard per package and one per non-empty OS version."""

    ios_shards = (shard_for_ios(catalog, ios_version) for ios_version in catalog.ios_versions)
    return CatalogShards(
        packages=tuple(PackageShard(package) for package in catalog.packages),
        ios_versions=tuple(shard for shard in ios_shards if shard.packages),
    )
