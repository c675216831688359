from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tweakcompat.config.storage import StorageConfig, get_storage_config

if TYPE_CHECKING:
    from pathlib import Path


def test_storage_config_prefers_explicit_directory(tmp_path: Path) -> None:
    config = get_storage_config(data_dir=tmp_path / "explicit")

    assert config.resolve_data_dir() == (tmp_path / "explicit").resolve()


def test_storage_config_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TWEAKCOMPAT_DATA_DIR", str(tmp_path / "from-env"))

    config = get_storage_config()

    assert config.resolve_data_dir() == (tmp_path / "from-env").resolve()


def test_storage_config_defaults_to_xdg_data_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("TWEAKCOMPAT_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))

    config = get_storage_config()

    assert config.resolve_data_dir() == (tmp_path / "xdg" / "tweakcompat").resolve()


def test_storage_layout(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path)

    assert config.tweak_list_path() == tmp_path.resolve() / "tweaks.json"
    assert config.packages_dir() == tmp_path.resolve() / "json" / "packages"
    assert config.ios_versions_dir() == tmp_path.resolve() / "json" / "iOS"


def test_ensure_data_dir_creates_directory(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path / "nested" / "data")

    created = config.ensure_data_dir()

    assert created.is_dir()
