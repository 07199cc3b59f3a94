# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the workplace package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Mapping


DEFAULT_FALLBACK_DIALOG_URI = "/system/workplace/views/explorer/explorer_files.jsp"


@dataclass
class WorkplaceSettings:
    """Container for workplace configuration derived from environment variables."""

    workplace_path: str = "/workplace"
    context_path: str = "/opencms"
    default_locale: str = "en"
    menu_cache_size: int = 16
    fallback_dialog_uri: str = DEFAULT_FALLBACK_DIALOG_URI
    config_path: Path | None = None
    bundle_dirs: list[Path] = field(default_factory=list)
    sync_enabled: bool = False
    sync_destination: str | None = None
    sync_source_folders: list[str] = field(default_factory=list)
    report_poll_interval: float = 0.5
    session_user_key: str = "workplace_user"

    def __post_init__(self) -> None:
        """Normalise paths and clamp numeric limits."""
        self.workplace_path = self._normalize_prefix(self.workplace_path)
        context = (self.context_path or "").strip().rstrip("/")
        if context and not context.startswith("/"):
            context = f"/{context}"
        self.context_path = context
        if self.config_path is not None and not isinstance(self.config_path, Path):
            self.config_path = Path(str(self.config_path))
        self.bundle_dirs = [Path(str(item)) for item in self.bundle_dirs]
        if self.menu_cache_size < 1:
            self.menu_cache_size = 1
        if not self.fallback_dialog_uri:
            self.fallback_dialog_uri = DEFAULT_FALLBACK_DIALOG_URI

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "WORKPLACE_",
    ) -> "WorkplaceSettings":
        """Build a settings instance from environment variables."""
        source = env or os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        config_path = data.get("CONFIG_PATH")
        bundle_dirs = cls._to_list(data.get("BUNDLE_DIRS"), separator=os.pathsep)
        return cls(
            workplace_path=data.get("PATH") or "/workplace",
            context_path=data.get("CONTEXT_PATH", "/opencms"),
            default_locale=data.get("DEFAULT_LOCALE") or "en",
            menu_cache_size=cls._to_int(data.get("MENU_CACHE_SIZE"), default=16),
            fallback_dialog_uri=data.get("FALLBACK_DIALOG_URI") or DEFAULT_FALLBACK_DIALOG_URI,
            config_path=Path(config_path) if config_path else None,
            bundle_dirs=[Path(item) for item in bundle_dirs],
            sync_enabled=cls._to_bool(data.get("SYNC_ENABLED")),
            sync_destination=data.get("SYNC_DESTINATION") or None,
            sync_source_folders=cls._to_list(data.get("SYNC_SOURCE_FOLDERS"), separator=","),
            report_poll_interval=cls._to_float(data.get("REPORT_POLL_INTERVAL"), default=0.5),
            session_user_key=data.get("SESSION_USER_KEY") or "workplace_user",
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_float(value: str | None, *, default: float) -> float:
        """Return a float from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _to_list(value: str | None, *, separator: str) -> list[str]:
        if not value:
            return []
        return [item.strip() for item in value.split(separator) if item.strip()]

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash."""
        normalized = value.strip()
        stripped = normalized.strip("/")
        if not stripped:
            return "/"
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``WorkplaceSettings`` instance."""

    def __init__(self, initial: WorkplaceSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial

    def configure(self, settings: WorkplaceSettings) -> None:
        """Install a new settings instance."""
        with self._lock:
            self._settings = settings

    def current(self) -> WorkplaceSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = WorkplaceSettings.from_env()
            return self._settings


_settings_manager = SettingsManager()


def configure(settings: WorkplaceSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> WorkplaceSettings:
    """Return the active settings instance used by workplace components."""
    return _settings_manager.current()


__all__ = [
    "DEFAULT_FALLBACK_DIALOG_URI",
    "WorkplaceSettings",
    "SettingsManager",
    "configure",
    "current_settings",
]


# The End
