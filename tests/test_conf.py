# -*- coding: utf-8 -*-
"""Tests for environment settings and the runtime system configuration."""

from __future__ import annotations

import os
from pathlib import Path

from workplace.conf import (
    DEFAULT_FALLBACK_DIALOG_URI,
    SettingsManager,
    WorkplaceSettings,
)
from workplace.core.settings import SettingsKey, SystemConfig


def test_from_env_parses_values() -> None:
    settings = WorkplaceSettings.from_env(
        {
            "WORKPLACE_PATH": "admin/workplace/",
            "WORKPLACE_CONTEXT_PATH": "cms/",
            "WORKPLACE_MENU_CACHE_SIZE": "0",
            "WORKPLACE_CONFIG_PATH": "/etc/workplace.json",
            "WORKPLACE_BUNDLE_DIRS": os.pathsep.join(["/a", "/b"]),
            "WORKPLACE_SYNC_ENABLED": "yes",
            "WORKPLACE_SYNC_SOURCE_FOLDERS": "/sites/a/, /sites/b/",
            "WORKPLACE_REPORT_POLL_INTERVAL": "fast",
            "OTHER_SETTING": "ignored",
        }
    )

    assert settings.workplace_path == "/admin/workplace"
    assert settings.context_path == "/cms"
    assert settings.menu_cache_size == 1
    assert settings.config_path == Path("/etc/workplace.json")
    assert settings.bundle_dirs == [Path("/a"), Path("/b")]
    assert settings.sync_enabled is True
    assert settings.sync_source_folders == ["/sites/a/", "/sites/b/"]
    assert settings.report_poll_interval == 0.5
    assert settings.fallback_dialog_uri == DEFAULT_FALLBACK_DIALOG_URI


def test_settings_manager_replaces_settings() -> None:
    manager = SettingsManager(WorkplaceSettings())
    replacement = WorkplaceSettings(default_locale="de")

    manager.configure(replacement)

    assert manager.current() is replacement


def test_system_config_defaults_and_coercion() -> None:
    config = SystemConfig()

    assert config.get_cached(SettingsKey.LEGACY_INITIAL_PARAM) == "initial=true"
    config.set(SettingsKey.MENU_CACHE_SIZE, "8")
    config.set(SettingsKey.REPORT_POLL_INTERVAL, "slow")
    assert config.get_cached(SettingsKey.MENU_CACHE_SIZE) == 8
    assert config.get_cached(SettingsKey.REPORT_POLL_INTERVAL) == 0.5
    assert config.get_cached("UNKNOWN", "fallback") == "fallback"


def test_system_config_reload_applies_source() -> None:
    config = SystemConfig(lambda: {"CONTEXT_PATH": "/cms", "BOGUS": True})
    config.set(SettingsKey.DEFAULT_LOCALE, "de")

    config.reload()

    assert config.get_cached(SettingsKey.CONTEXT_PATH) == "/cms"
    assert config.get_cached(SettingsKey.DEFAULT_LOCALE) == "en"


# The End
