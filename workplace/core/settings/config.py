# -*- coding: utf-8 -*-
"""
config

Runtime key/value configuration layered over the workplace defaults.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Mapping

from .defaults import DEFAULT_SETTINGS
from .keys import SettingsKey


logger = logging.getLogger(__name__)

SettingsSource = Callable[[], Mapping[str, Any]]


class SystemConfig:
    """Serve cached workplace settings keyed by ``SettingsKey`` values."""

    _CASTS: dict[str, Callable[[Any], Any]] = {
        "string": str,
        "int": int,
        "float": float,
        "bool": lambda value: str(value).strip().lower() in {"1", "true", "yes", "on"},
    }

    def __init__(self, source: SettingsSource | None = None) -> None:
        """Prepare an empty cache and remember the optional override ``source``."""

        self._cache: dict[str, Any] = {}
        self._lock = RLock()
        self._source = source

    def get_cached(self, key: SettingsKey | str, default: Any = None) -> Any:
        """Return the cached value for ``key`` or ``default`` when unset."""

        token = str(key)
        with self._lock:
            if token in self._cache:
                return self._cache[token]
        if default is not None:
            return default
        entry = self._default_entry(token)
        return entry[0] if entry is not None else None

    def set(self, key: SettingsKey | str, value: Any) -> None:
        """Store ``value`` for ``key`` after coercing it to the declared type."""

        token = str(key)
        with self._lock:
            self._cache[token] = self._coerce(token, value)

    def load(self, values: Mapping[str, Any]) -> None:
        """Merge ``values`` into the cache, ignoring unknown keys."""

        known = set(SettingsKey.values())
        for token, value in values.items():
            if token not in known:
                logger.warning("Ignoring unknown workplace setting %s", token)
                continue
            self.set(token, value)

    def reload(self) -> None:
        """Reset the cache to defaults and re-apply the configured source."""

        with self._lock:
            self._cache = {str(key): value for key, (value, _kind) in DEFAULT_SETTINGS.items()}
            source = self._source
        if source is not None:
            self.load(source())

    def _coerce(self, token: str, value: Any) -> Any:
        entry = self._default_entry(token)
        if entry is None or value is None:
            return value
        cast = self._CASTS.get(entry[1])
        if cast is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning("Invalid value %r for setting %s, using default", value, token)
            return entry[0]

    @staticmethod
    def _default_entry(token: str) -> tuple[object, str] | None:
        for key, entry in DEFAULT_SETTINGS.items():
            if str(key) == token:
                return entry
        return None


system_config = SystemConfig()


__all__ = ["SystemConfig", "system_config", "logger"]


# The End
