# -*- coding: utf-8 -*-
"""
keys

Available settings keys for the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .choices import StrChoices


class SettingsKey(StrChoices):
    """Available settings keys for the workplace."""

    # --- Localization ---
    DEFAULT_LOCALE        = ("DEFAULT_LOCALE", "Default locale token")
    DEFAULT_ENCODING      = ("DEFAULT_ENCODING", "Default request encoding")

    # --- Workplace paths ---
    CONTEXT_PATH          = ("CONTEXT_PATH", "Servlet context path prefix for links")
    WORKPLACE_VFS_PATH    = ("WORKPLACE_VFS_PATH", "Workplace folder in the repository")
    LEGACY_ACTION_PATH    = ("LEGACY_ACTION_PATH", "Folder of legacy template actions")
    LEGACY_INITIAL_PARAM  = ("LEGACY_INITIAL_PARAM", "Query appended to legacy menu links")
    FALLBACK_DIALOG_URI   = ("FALLBACK_DIALOG_URI", "Dialog URI used when no handler applies")

    # --- Context menus ---
    MENU_CACHE_SIZE       = ("MENU_CACHE_SIZE", "Number of locales cached per context menu")

    # --- Upload folders ---
    UPLOAD_FOLDER_PROPERTY = (
        "UPLOAD_FOLDER_PROPERTY",
        "Property name pattern naming the upload folder for a content type",
    )

    # --- Reports ---
    REPORT_POLL_INTERVAL  = ("REPORT_POLL_INTERVAL", "Seconds between report updates")

# The End
