from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tweakcompat.adapters.json_store import JsonCatalogStore
from tweakcompat.config.storage import StorageConfig

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("GITHUB_API_TOKEN", raising=False)
    monkeypatch.delenv("TWEAKCOMPAT_GITHUB_OWNER", raising=False)
    monkeypatch.delenv("TWEAKCOMPAT_GITHUB_REPO", raising=False)
    monkeypatch.setenv("TWEAKCOMPAT_DATA_DIR", str(tmp_path / "env-data"))


@pytest.fixture
def storage_config(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path / "data")


@pytest.fixture
def json_store(storage_config: StorageConfig) -> JsonCatalogStore:
    return JsonCatalogStore(storage_config)
