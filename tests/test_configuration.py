# -*- coding: utf-8 -*-
"""Tests for loading the workplace configuration document."""

from __future__ import annotations

import json

import pytest

from workplace.adapters import MemoryRepository
from workplace.core.accounts import AccountField
from workplace.core.configuration import WorkplaceConfigurationLoader
from workplace.core.exceptions import ConfigurationError, UnknownTypeError
from workplace.core.handlers import ResourceTypeDialogHandler, StaticDialogHandler


@pytest.fixture
def loader() -> WorkplaceConfigurationLoader:
    return WorkplaceConfigurationLoader(MemoryRepository(), menu_cache_size=4)


def test_loads_sample_document(loader, sample_config) -> None:
    config = loader.load(sample_config)

    plain = config.menus.get("plain")
    assert [entry.key for entry in plain.entries] == ["lock", "", "rename", "properties"]
    assert plain.cache.max_entries == 4
    assert [menu.type_id for menu in config.menus] == [0, 1]
    assert isinstance(config.handlers.get("rename"), StaticDialogHandler)
    assert isinstance(config.handlers.get("edit"), ResourceTypeDialogHandler)
    assert config.userinfo.get_entry("newsletter").convert("true") is True
    assert [info.field for info in config.account_infos] == [AccountField.FIRSTNAME, AccountField.ADDINFO]
    assert config.account_infos[1].editable is False
    assert config.upload_folders == {"image": "upload.folder.images"}
    assert config.synchronize is None


def test_loads_document_from_file(loader, sample_config, tmp_path) -> None:
    path = tmp_path / "workplace.json"
    path.write_text(json.dumps(sample_config), encoding="utf-8")

    config = loader.load(path)

    assert len(config.menus) == 2


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]"],
)
def test_rejects_malformed_files(loader, tmp_path, content) -> None:
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        loader.load(path)


def test_rejects_missing_file(loader, tmp_path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read"):
        loader.load(tmp_path / "missing.json")


def test_rejects_unknown_sections(loader, sample_config) -> None:
    sample_config["menus"] = []

    with pytest.raises(ConfigurationError):
        loader.load(sample_config)


def test_rejects_short_rules(loader, sample_config) -> None:
    sample_config["contextmenus"][0]["entries"][0]["rules"] = "aaaa"

    with pytest.raises(ConfigurationError):
        loader.load(sample_config)


def test_unknown_handler_type_is_reported(loader, sample_config) -> None:
    sample_config["dialoghandlers"].append({"key": "x", "handler": "org.example.Missing"})

    with pytest.raises(UnknownTypeError):
        loader.load(sample_config)


def test_misconfigured_handler(loader, sample_config) -> None:
    sample_config["dialoghandlers"].append({"key": "x", "handler": "static"})

    with pytest.raises(ConfigurationError, match="'x'"):
        loader.load(sample_config)


def test_unknown_value_type_is_reported(loader, sample_config) -> None:
    sample_config["userinfo"][0]["entries"].append({"key": "color", "type_name": "java.awt.Color"})

    with pytest.raises(UnknownTypeError):
        loader.load(sample_config)


def test_unknown_account_field(loader, sample_config) -> None:
    sample_config["accountinfos"].append({"field": "password"})

    with pytest.raises(ConfigurationError, match="password"):
        loader.load(sample_config)


def test_synchronize_section(loader) -> None:
    config = loader.load(
        {"synchronize": {"enabled": True, "destination": "/srv/sync", "source_folders": ["/sites/"]}}
    )

    assert config.synchronize.enabled is True
    assert config.synchronize.source_folders == ["/sites/"]


# The End
