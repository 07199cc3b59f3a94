# -*- coding: utf-8 -*-
"""
menu

Explorer context menus and their client side script.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

from pydantic import BaseModel, ConfigDict, model_validator

from .cache.menu import ContextMenuScriptCache
from .messages import MessageCatalog
from .settings import SettingsKey, system_config
from .settings.choices import StrChoices


logger = logging.getLogger(__name__)

# Authored rule layout, one character per column ("a" active, "i" inactive,
# "d" hidden):
#   [0]      online project
#   [1]      offline project, resource outside the project
#   [2, 6)   unlocked, by resource state
#   [6, 10)  locked by the current user, by resource state
#   [10, 14) locked by another user, by resource state
# The generated rule inserts an "unlocked with autolock" block at [6, 10).
RULE_MIN_LENGTH = 10
AUTOLOCK_EXEMPT_KEYS = frozenset({"lock", "unlock"})


def expand_rule(rules: str, key: str) -> str:
    """Return ``rules`` with the autolock block spliced in at index 6.

    Lock and unlock entries reuse their unlocked columns for the autolock
    block; every other entry reuses its locked-by-me columns. The result is
    always four characters longer than ``rules``.
    """

    if len(rules) < RULE_MIN_LENGTH:
        raise ValueError(
            f"Menu rule {rules!r} is shorter than {RULE_MIN_LENGTH} characters"
        )
    if (key or "").lower() in AUTOLOCK_EXEMPT_KEYS:
        inserted = rules[2:6]
    else:
        inserted = rules[6:10]
    return rules[:6] + inserted + rules[6:]


def js_string(value: str) -> str:
    """Escape ``value`` for use inside a double quoted script literal."""

    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("</", "<\\/")
    )


class MenuEntryKind(StrChoices):
    """Kinds of context menu entries."""

    ITEM = ("entry", "Entry")
    SEPARATOR = ("separator", "Separator")


class MenuEntry(BaseModel):
    """Configured context menu entry."""

    model_config = ConfigDict(frozen=True)

    kind: MenuEntryKind = MenuEntryKind.ITEM
    key: str = ""
    uri: str = ""
    target: str | None = None
    rules: str = ""
    order: float = 0
    legacy: bool = False

    @model_validator(mode="after")
    def _check_item(self) -> "MenuEntry":
        if self.kind == MenuEntryKind.ITEM:
            if not self.key:
                raise ValueError("menu entries need a message key")
            if len(self.rules) < RULE_MIN_LENGTH:
                raise ValueError(
                    f"menu entry {self.key!r} needs a rule of at least "
                    f"{RULE_MIN_LENGTH} characters"
                )
        return self

    @classmethod
    def separator(cls, order: float) -> "MenuEntry":
        """Return a separator placed at ``order``."""
        return cls(kind=MenuEntryKind.SEPARATOR, order=order)

    @property
    def is_separator(self) -> bool:
        return self.kind == MenuEntryKind.SEPARATOR


class MenuLinkBuilder:
    """Compute the link a menu entry points to."""

    def __init__(
        self,
        *,
        context_path: str | None = None,
        workplace_path: str | None = None,
        legacy_path: str | None = None,
        initial_param: str | None = None,
    ) -> None:
        """Use explicit values or fall back to the cached system settings."""

        self.context_path = (
            context_path
            if context_path is not None
            else str(system_config.get_cached(SettingsKey.CONTEXT_PATH, "/opencms"))
        ).rstrip("/")
        self.workplace_path = workplace_path or str(
            system_config.get_cached(SettingsKey.WORKPLACE_VFS_PATH, "/system/workplace/")
        )
        self.legacy_path = legacy_path or str(
            system_config.get_cached(SettingsKey.LEGACY_ACTION_PATH, "/system/workplace/action/")
        )
        self.initial_param = initial_param or str(
            system_config.get_cached(SettingsKey.LEGACY_INITIAL_PARAM, "initial=true")
        )

    def build(self, entry: MenuEntry) -> str:
        """Return the absolute link for ``entry``."""

        uri = entry.uri
        if uri.startswith("/"):
            link = self.context_path + uri
        elif entry.legacy:
            link = self.context_path + self.legacy_path + uri
        else:
            link = self.context_path + self.workplace_path + uri
        if entry.legacy:
            separator = "&" if "?" in uri else "?"
            link = f"{link}{separator}{self.initial_param}"
        return link


class ContextMenu:
    """Ordered entries of one resource type plus their cached script."""

    SEPARATOR_STATEMENT = 'addMenuEntry({type_id}, "-", " ", "\'\'", "");'
    ENTRY_STATEMENT = 'addMenuEntry({type_id}, "{label}", "{link}", "\'{target}\'", "{rules}");'

    def __init__(
        self,
        type_id: int,
        type_name: str = "",
        *,
        entries: Iterable[MenuEntry] = (),
        cache: ContextMenuScriptCache | None = None,
        link_builder: MenuLinkBuilder | None = None,
    ) -> None:
        """Create the menu for resource type ``type_id``."""

        self.type_id = type_id
        self.type_name = type_name
        self._entries: List[MenuEntry] = []
        self._cache = cache or ContextMenuScriptCache(
            int(system_config.get_cached(SettingsKey.MENU_CACHE_SIZE, 16))
        )
        self._link_builder = link_builder
        if entries:
            self.add_entries(entries)

    @property
    def entries(self) -> tuple[MenuEntry, ...]:
        """Return the entries sorted by their order."""
        return tuple(self._entries)

    @property
    def cache(self) -> ContextMenuScriptCache:
        return self._cache

    def add_entries(self, entries: Iterable[MenuEntry]) -> None:
        """Append ``entries`` and re-sort the whole menu by order."""

        self._entries.extend(entries)
        self._entries.sort(key=lambda item: item.order)
        self._cache.clear()

    def invalidate(self) -> None:
        """Drop every cached script of this menu."""

        self._cache.clear()

    def generate_script(self, catalog: MessageCatalog) -> str:
        """Return the registration script for the locale of ``catalog``."""

        cached = self._cache.load(catalog.locale)
        if cached is not None:
            return cached
        script = self._render(catalog)
        self._cache.store(catalog.locale, script)
        logger.debug("Generated context menu for type %s, locale %s", self.type_id, catalog.locale)
        return script

    def _render(self, catalog: MessageCatalog) -> str:
        links = self._link_builder or MenuLinkBuilder()
        statements: List[str] = []
        for entry in self._entries:
            if entry.is_separator:
                statements.append(self.SEPARATOR_STATEMENT.format(type_id=self.type_id))
                continue
            statements.append(
                self.ENTRY_STATEMENT.format(
                    type_id=self.type_id,
                    label=js_string(catalog.key(entry.key)),
                    link=js_string(links.build(entry)),
                    target=js_string(entry.target or ""),
                    rules=expand_rule(entry.rules, entry.key),
                )
            )
        return "\n".join(statements) + "\n"


class ContextMenuRegistry:
    """Context menus keyed by resource type name."""

    def __init__(self) -> None:
        self._menus: Dict[str, ContextMenu] = {}

    def register(self, menu: ContextMenu) -> None:
        """Register ``menu`` replacing an existing menu for the same type."""

        self._menus[menu.type_name or str(menu.type_id)] = menu

    def get(self, type_name: str) -> ContextMenu | None:
        return self._menus.get(type_name)

    def __iter__(self) -> Iterator[ContextMenu]:
        return iter(sorted(self._menus.values(), key=lambda menu: menu.type_id))

    def __len__(self) -> int:
        return len(self._menus)

    def generate_script(self, catalog: MessageCatalog) -> str:
        """Return the scripts of every menu ordered by type id."""

        return "".join(menu.generate_script(catalog) for menu in self)

    def invalidate(self) -> None:
        """Drop the cached scripts of every menu."""

        for menu in self._menus.values():
            menu.invalidate()

    def clear(self) -> None:
        self._menus.clear()


__all__ = [
    "RULE_MIN_LENGTH",
    "AUTOLOCK_EXEMPT_KEYS",
    "expand_rule",
    "js_string",
    "MenuEntryKind",
    "MenuEntry",
    "MenuLinkBuilder",
    "ContextMenu",
    "ContextMenuRegistry",
]


# The End
