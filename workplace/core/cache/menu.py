# -*- coding: utf-8 -*-
"""
menu

Bounded per-locale cache for generated context menu scripts.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections import OrderedDict
from threading import RLock
from typing import List


class ContextMenuScriptCache:
    """Keep the most recently used scripts keyed by locale.

    Generation is idempotent for a fixed configuration, so two requests
    building the same locale at once only duplicate work. The lock guards
    the mapping, not the generation.
    """

    def __init__(self, max_entries: int = 16) -> None:
        """Initialise an empty cache holding at most ``max_entries`` locales."""

        self._max_entries = max(1, int(max_entries))
        self._payloads: "OrderedDict[str, str]" = OrderedDict()
        self._lock = RLock()

    @property
    def max_entries(self) -> int:
        """Return the configured capacity."""
        return self._max_entries

    def load(self, locale: str) -> str | None:
        """Return the cached script for ``locale`` and mark it recently used."""

        with self._lock:
            script = self._payloads.get(locale)
            if script is not None:
                self._payloads.move_to_end(locale)
            return script

    def store(self, locale: str, script: str) -> None:
        """Persist ``script`` for ``locale`` evicting the oldest entry if full."""

        with self._lock:
            self._payloads[locale] = script
            self._payloads.move_to_end(locale)
            while len(self._payloads) > self._max_entries:
                self._payloads.popitem(last=False)

    def resize(self, max_entries: int) -> None:
        """Change the capacity, evicting surplus entries."""

        with self._lock:
            self._max_entries = max(1, int(max_entries))
            while len(self._payloads) > self._max_entries:
                self._payloads.popitem(last=False)

    def locales(self) -> List[str]:
        """Return cached locales from least to most recently used."""

        with self._lock:
            return list(self._payloads)

    def clear(self) -> None:
        """Remove all cached scripts."""

        with self._lock:
            self._payloads.clear()


__all__ = ["ContextMenuScriptCache"]


# The End
