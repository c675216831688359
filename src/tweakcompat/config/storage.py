"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "tweakcompat"
TWEAK_LIST_FILENAME: Final[str] = "tweaks.json"
OUTPUT_DIR_NAME: Final[str] = "json"
PACKAGES_DIR_NAME: Final[str] = "packages"
IOS_DIR_NAME: Final[str] = "iOS"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    tweak_list_filename: str = TWEAK_LIST_FILENAME
    output_dir_name: str = OUTPUT_DIR_NAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def tweak_list_path(self) -> Path:
        return self.resolve_data_dir() / self.tweak_list_filename

    def packages_dir(self) -> Path:
        return self.resolve_data_dir() / self.output_dir_name / PACKAGES_DIR_NAME

    def ios_versions_dir(self) -> Path:
        return self.resolve_data_dir() / self.output_dir_name / IOS_DIR_NAME


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config(*, data_dir: Path | None = None) -> StorageConfig:
    if data_dir is not None:
        return StorageConfig(data_dir=data_dir)
    env_dir = os.getenv("TWEAKCOMPAT_DATA_DIR")
    return StorageConfig(data_dir=Path(env_dir) if env_dir else _default_data_dir())
