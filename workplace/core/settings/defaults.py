# -*- coding: utf-8 -*-
"""
defaults

Default settings mapping.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .keys import SettingsKey

DEFAULT_SETTINGS: dict[SettingsKey, tuple[object, str]] = {
    # Localization
    SettingsKey.DEFAULT_LOCALE:         ("en", "string"),
    SettingsKey.DEFAULT_ENCODING:       ("UTF-8", "string"),

    # Workplace paths
    SettingsKey.CONTEXT_PATH:           ("/opencms", "string"),
    SettingsKey.WORKPLACE_VFS_PATH:     ("/system/workplace/", "string"),
    SettingsKey.LEGACY_ACTION_PATH:     ("/system/workplace/action/", "string"),
    SettingsKey.LEGACY_INITIAL_PARAM:   ("initial=true", "string"),
    SettingsKey.FALLBACK_DIALOG_URI:    ("/system/workplace/views/explorer/explorer_files.jsp", "string"),

    # Context menus
    SettingsKey.MENU_CACHE_SIZE:        (16, "int"),

    # Upload folders
    SettingsKey.UPLOAD_FOLDER_PROPERTY: ("upload.folder.{type}", "string"),

    # Reports
    SettingsKey.REPORT_POLL_INTERVAL:   (0.5, "float"),
}

# The End
