"""File-backed catalog store writing the tweak list and published JSON documents."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from tweakcompat.config.storage import StorageConfig, get_storage_config
from tweakcompat.domain.model import Catalog

from .schema import TweakListDocument
from .translator import (
    catalog_document,
    catalog_from_document,
    ios_version_document,
    package_document,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tweakcompat.domain.sharding import OsVersionShard, PackageShard

log = getLogger(__name__)


class CatalogDocumentError(RuntimeError):
    """Raised when the persisted tweak list cannot be read."""


def _document_filename(key: str) -> str:
    return key.replace("/", "_").replace("\\", "_") + ".json"


def _write_document(path: Path, document: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")


@dataclass(slots=True)
class JsonCatalogStore:
    config: StorageConfig = field(default_factory=get_storage_config)

    def load_catalog(self) -> Catalog:
        path = self.config.tweak_list_path()
        if not path.exists():
            log.info("No tweak list at %s; starting from an empty catalog", path)
            return Catalog()
        try:
            document = TweakListDocument.model_validate_json(path.read_bytes())
        except ValidationError as exc:
            raise CatalogDocumentError(f"Unreadable tweak list {path}: {exc}") from exc
        return catalog_from_document(document)

    def save_catalog(self, catalog: Catalog) -> None:
        self.config.ensure_data_dir()
        _write_document(self.config.tweak_list_path(), catalog_document(catalog))

    def wipe_packages(self) -> None:
        catalog = self.load_catalog()
        self.save_catalog(replace(catalog, packages=(), ios_versions=()))

    def wipe_output(self) -> None:
        for directory in (self.config.packages_dir(), self.config.ios_versions_dir()):
            if not directory.exists():
                continue
            for path in directory.glob("*.json"):
                path.unlink()

    def write_package(self, shard: PackageShard) -> None:
        path = self.config.packages_dir() / _document_filename(shard.package.id)
        _write_document(path, package_document(shard.package))

    def write_ios_version(self, shard: OsVersionShard) -> None:
        path = self.config.ios_versions_dir() / _document_filename(shard.ios_version)
        _write_document(path, ios_version_document(shard))
