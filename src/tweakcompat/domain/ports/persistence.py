"""Ports for persisting the catalog and its published documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tweakcompat.domain.model import Catalog
    from tweakcompat.domain.sharding import OsVersionShard, PackageShard


@runtime_checkable
class CatalogStore(Protocol):
    """Persistence contract for the tweak list and its output documents."""

    def load_catalog(self) -> Catalog: ...

    def save_catalog(self, catalog: Catalog) -> None: ...

    def wipe_packages(self) -> None:
        """Drop every package (and the OS-version list) while keeping the device table."""
        ...

    def wipe_output(self) -> None:
        """Remove every previously published package and OS-version document."""
        ...

    def write_package(self, shard: PackageShard) -> None: ...

    def write_ios_version(self, shard: OsVersionShard) -> None: ...
