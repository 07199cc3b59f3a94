# -*- coding: utf-8 -*-
"""
messages

Localized message catalogs loaded from JSON bundles.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from threading import RLock
from typing import Dict, Iterable, List, Mapping


logger = logging.getLogger(__name__)

BUILTIN_BUNDLE_DIR = Path(__file__).resolve().parent.parent / "locales"

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class MessageCatalog:
    """Resolve message keys for a single locale."""

    PARAM_SEPARATOR = "|"

    def __init__(self, locale: str, messages: Mapping[str, str] | None = None) -> None:
        """Bind ``messages`` to ``locale``."""

        self.locale = locale
        self._messages: Dict[str, str] = dict(messages or {})

    def resolve(self, name: str) -> str | None:
        """Return the message for ``name`` or ``None`` when it is missing."""

        return self._messages.get(name)

    def key(self, name: str, *params: object) -> str:
        """Return the formatted message for ``name`` or ``???name???``."""

        message = self._messages.get(name)
        if message is None:
            return self.format_unknown_key(name)
        return self._format(message, params)

    def key_with_params(self, token: str) -> str | None:
        """Resolve ``name|param|...`` returning ``None`` for unknown names."""

        name, *params = token.split(self.PARAM_SEPARATOR)
        message = self._messages.get(name)
        if message is None:
            return None
        return self._format(message, params)

    def __contains__(self, name: object) -> bool:
        return name in self._messages

    @staticmethod
    def format_unknown_key(name: str) -> str:
        return f"???{name}???"

    @staticmethod
    def _format(message: str, params: Iterable[object]) -> str:
        values = [str(value) for value in params]
        if not values:
            return message

        def _replace(match: re.Match[str]) -> str:
            index = int(match.group(1))
            return values[index] if index < len(values) else match.group(0)

        return _PLACEHOLDER.sub(_replace, message)


class MessageBundleLoader:
    """Load and cache message catalogs from ``<locale>.json`` bundles."""

    def __init__(
        self,
        bundle_dirs: Iterable[Path | str] = (),
        *,
        default_locale: str = "en",
        include_builtin: bool = True,
    ) -> None:
        """Remember the bundle directories searched for each locale."""

        dirs: List[Path] = [BUILTIN_BUNDLE_DIR] if include_builtin else []
        dirs.extend(Path(str(item)) for item in bundle_dirs)
        self._bundle_dirs = dirs
        self.default_locale = default_locale
        self._catalogs: Dict[str, MessageCatalog] = {}
        self._lock = RLock()

    def catalog(self, locale: str | None = None) -> MessageCatalog:
        """Return the cached catalog for ``locale``."""

        token = self.normalize_locale(locale or self.default_locale)
        with self._lock:
            cached = self._catalogs.get(token)
        if cached is not None:
            return cached
        messages: Dict[str, str] = {}
        for candidate in reversed(self._fallback_chain(token)):
            messages.update(self._read_locale(candidate))
        catalog = MessageCatalog(token, messages)
        with self._lock:
            self._catalogs[token] = catalog
        return catalog

    def clear(self) -> None:
        """Forget every loaded catalog."""

        with self._lock:
            self._catalogs.clear()

    @staticmethod
    def normalize_locale(locale: str) -> str:
        """Return ``locale`` in ``ll_CC`` form."""

        parts = locale.strip().replace("-", "_").split("_")
        language = parts[0].lower()
        if len(parts) > 1 and parts[1]:
            return f"{language}_{parts[1].upper()}"
        return language

    def _fallback_chain(self, locale: str) -> List[str]:
        chain = [locale]
        language = locale.split("_")[0]
        if language not in chain:
            chain.append(language)
        default = self.normalize_locale(self.default_locale)
        if default not in chain:
            chain.append(default)
        return chain

    def _read_locale(self, locale: str) -> Dict[str, str]:
        merged: Dict[str, str] = {}
        for directory in self._bundle_dirs:
            path = directory / f"{locale}.json"
            if not path.is_file():
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("Skipping message bundle %s: %s", path, exc)
                continue
            if not isinstance(data, dict):
                logger.warning("Skipping message bundle %s: not a JSON object", path)
                continue
            merged.update({str(key): str(value) for key, value in data.items()})
        return merged


__all__ = ["MessageCatalog", "MessageBundleLoader", "BUILTIN_BUNDLE_DIR"]


# The End
