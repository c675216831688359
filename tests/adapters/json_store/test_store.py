from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.helpers.submissions import DEVICES, make_change
from tweakcompat.adapters.json_store import CatalogDocumentError, JsonCatalogStore
from tweakcompat.domain.aggregation import aggregate_catalog
from tweakcompat.domain.merge import merge_change
from tweakcompat.domain.model import Catalog, ReviewStatus
from tweakcompat.domain.pipeline import publish_outputs

if TYPE_CHECKING:
    from tweakcompat.config.storage import StorageConfig


def _catalog() -> Catalog:
    catalog = Catalog(devices=DEVICES)
    for change in (
        make_change(device="iPhone5,1", status=ReviewStatus.NOT_WORKING, user_notes="crash"),
        make_change(user_name="other", device="iPhone10,3"),
        make_change(ios_version="13.5", user_name="third"),
    ):
        catalog = merge_change(catalog, change).catalog
    return aggregate_catalog(catalog)


def test_missing_tweak_list_loads_as_empty_catalog(json_store: JsonCatalogStore) -> None:
    assert json_store.load_catalog() == Catalog()


def test_saved_catalog_loads_back_unchanged(json_store: JsonCatalogStore) -> None:
    catalog = _catalog()

    json_store.save_catalog(catalog)

    assert json_store.load_catalog() == catalog


def test_tweak_list_uses_document_field_names(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    json_store.save_catalog(_catalog())

    raw = json.loads(storage_config.tweak_list_path().read_text(encoding="utf-8"))

    assert raw["iOSVersions"] == ["13.5", "14.0"]
    assert raw["devices"][0] == {
        "deviceId": "iPhone5,1",
        "deviceName": "iPhone 5",
        "arch32bit": True,
    }
    version = raw["packages"][0]["versions"][0]
    assert version["iOSVersion"] == "14.0"
    assert version["tweakVersion"] == "1.2.0"
    assert version["outcome"]["calculatedStatus"] == "Likely working"
    assert version["outcome"]["arch32"]["calculatedStatus"] == "Not working"
    assert version["users"][0]["userName"] == "reviewer"
    assert version["users"][0]["status"] == "notworking"
    assert version["users"][0]["userNotes"] == "crash"


def test_tweak_list_accepts_legacy_status_spelling(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    document = {
        "packages": [
            {
                "id": "com.acme.tweak",
                "name": "Acme Tweak",
                "latest": "1.0",
                "versions": [
                    {
                        "iOSVersion": "12.4",
                        "tweakVersion": "1.0",
                        "users": [
                            {"userName": "a", "deviceId": "x|iPhone", "status": "not working"}
                        ],
                    }
                ],
            }
        ],
        "devices": [],
        "iOSVersions": ["12.4"],
        "unknownTopLevel": True,
    }
    storage_config.ensure_data_dir()
    storage_config.tweak_list_path().write_text(json.dumps(document), encoding="utf-8")

    catalog = json_store.load_catalog()

    (review,) = catalog.packages[0].versions[0].reviews
    assert review.status is ReviewStatus.NOT_WORKING
    assert review.device == "x|iPhone"


def test_unreadable_tweak_list_raises(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    storage_config.ensure_data_dir()
    storage_config.tweak_list_path().write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogDocumentError):
        json_store.load_catalog()


def test_wipe_packages_keeps_device_table(json_store: JsonCatalogStore) -> None:
    json_store.save_catalog(_catalog())

    json_store.wipe_packages()

    catalog = json_store.load_catalog()
    assert catalog.packages == ()
    assert catalog.ios_versions == ()
    assert catalog.devices == DEVICES


def test_published_documents_are_split_per_package_and_os_version(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    json_store.save_catalog(_catalog())

    publish_outputs(json_store)

    package_files = sorted(path.name for path in storage_config.packages_dir().iterdir())
    ios_files = sorted(path.name for path in storage_config.ios_versions_dir().iterdir())
    assert package_files == ["com.acme.tweak.json"]
    assert ios_files == ["13.5.json", "14.0.json"]

    package = json.loads((storage_config.packages_dir() / "com.acme.tweak.json").read_text())
    assert [version["iOSVersion"] for version in package["versions"]] == ["14.0", "13.5"]
    assert "users" in package["versions"][0]

    ios = json.loads((storage_config.ios_versions_dir() / "13.5.json").read_text())
    (summary,) = ios["packages"]
    assert summary["id"] == "com.acme.tweak"
    assert [version["iOSVersion"] for version in summary["versions"]] == ["13.5"]
    assert "users" not in summary["versions"][0]


def test_wipe_output_removes_stale_documents(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    json_store.save_catalog(_catalog())
    publish_outputs(json_store)
    stale = storage_config.ios_versions_dir() / "9.0.json"
    stale.write_text("{}", encoding="utf-8")

    publish_outputs(json_store)

    assert not stale.exists()
    assert (storage_config.ios_versions_dir() / "14.0.json").exists()


def test_wipe_output_without_published_documents(json_store: JsonCatalogStore) -> None:
    json_store.wipe_output()


def test_document_names_cannot_escape_output_directory(
    json_store: JsonCatalogStore, storage_config: StorageConfig
) -> None:
    catalog = merge_change(Catalog(), make_change(package_id="com/acme/../tweak")).catalog
    json_store.save_catalog(aggregate_catalog(catalog))

    publish_outputs(json_store)

    assert [path.name for path in storage_config.packages_dir().iterdir()] == [
        "com_acme_.._tweak.json"
    ]
