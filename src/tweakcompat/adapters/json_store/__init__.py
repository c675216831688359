"""JSON file persistence adapter."""

from __future__ import annotations

from .store import CatalogDocumentError, JsonCatalogStore

__all__ = ["CatalogDocumentError", "JsonCatalogStore"]
