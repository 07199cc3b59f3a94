# -*- coding: utf-8 -*-
"""Tests for context menu ordering, script generation, and caching."""

from __future__ import annotations

from workplace.core.cache import ContextMenuScriptCache
from workplace.core.menu import (
    ContextMenu,
    ContextMenuRegistry,
    MenuEntry,
    MenuLinkBuilder,
    js_string,
)
from workplace.core.messages import MessageCatalog


def _entry(key: str, order: float, **extra) -> MenuEntry:
    return MenuEntry(key=key, uri=f"views/{key}.jsp", rules="aaaaaaaaaaaaaa", order=order, **extra)


def _links() -> MenuLinkBuilder:
    return MenuLinkBuilder(context_path="/opencms")


def test_add_entries_keeps_entries_sorted_across_calls() -> None:
    menu = ContextMenu(1, "plain", link_builder=_links())

    menu.add_entries([_entry("c", 30), _entry("a", 10)])
    menu.add_entries([_entry("b", 20), MenuEntry.separator(15), _entry("d", 5)])

    assert [entry.order for entry in menu.entries] == [5, 10, 15, 20, 30]


def test_add_entries_is_stable_for_equal_orders() -> None:
    menu = ContextMenu(1, "plain", link_builder=_links())

    menu.add_entries([_entry("first", 10), _entry("second", 10)])
    menu.add_entries([_entry("third", 10)])

    assert [entry.key for entry in menu.entries] == ["first", "second", "third"]


def test_generate_script_statements(catalog: MessageCatalog) -> None:
    menu = ContextMenu(
        3,
        "plain",
        entries=[
            MenuEntry(key="lock", uri="commons/lock.jsp", rules="dddaaaaiiiiiii", order=1, legacy=True),
            MenuEntry.separator(2),
            MenuEntry(key="rename", uri="views/rename.jsp?mode=1", rules="diaaaaiiiddddd", order=3, legacy=True, target="_top"),
            MenuEntry(key="properties", uri="views/properties.jsp", rules="aaaaaaaaaaaaaa", order=4),
            MenuEntry(key="unknown", uri="/system/custom.jsp", rules="aaaaaaaaaaaaaa", order=5),
        ],
        link_builder=_links(),
    )

    lines = menu.generate_script(catalog).splitlines()

    assert lines == [
        'addMenuEntry(3, "Lock", "/opencms/system/workplace/action/commons/lock.jsp?initial=true", "\'\'", "dddaaadaaaaiiiiiii");',
        'addMenuEntry(3, "-", " ", "\'\'", "");',
        'addMenuEntry(3, "Rename \\"it\\"", "/opencms/system/workplace/action/views/rename.jsp?mode=1&initial=true", "\'_top\'", "diaaaaiiidiiiddddd");',
        'addMenuEntry(3, "Properties", "/opencms/system/workplace/views/properties.jsp", "\'\'", "aaaaaaaaaaaaaaaaaa");',
        'addMenuEntry(3, "???unknown???", "/opencms/system/custom.jsp", "\'\'", "aaaaaaaaaaaaaaaaaa");',
    ]


def test_link_builder_reads_context_path_from_settings() -> None:
    from workplace.core.settings import SettingsKey, system_config

    system_config.set(SettingsKey.CONTEXT_PATH, "/cms/")
    entry = MenuEntry(key="x", uri="views/x.jsp", rules="aaaaaaaaaa")

    assert MenuLinkBuilder().build(entry) == "/cms/system/workplace/views/x.jsp"


def test_script_cached_per_locale(catalog: MessageCatalog) -> None:
    menu = ContextMenu(1, "plain", entries=[_entry("lock", 1)], link_builder=_links())

    first = menu.generate_script(catalog)
    renamed = MessageCatalog("en", {"lock": "Sperre"})
    german = MessageCatalog("de", {"lock": "Sperren"})

    assert menu.generate_script(renamed) is first
    assert '"Sperren"' in menu.generate_script(german)
    assert menu.cache.locales() == ["en", "de"]


def test_add_entries_invalidates_cached_scripts(catalog: MessageCatalog) -> None:
    menu = ContextMenu(1, "plain", entries=[_entry("lock", 1)], link_builder=_links())
    menu.generate_script(catalog)

    menu.add_entries([_entry("properties", 2)])

    assert menu.cache.locales() == []
    assert '"Properties"' in menu.generate_script(catalog)


def test_script_cache_is_bounded() -> None:
    cache = ContextMenuScriptCache(max_entries=2)
    menu = ContextMenu(1, "plain", entries=[_entry("lock", 1)], cache=cache, link_builder=_links())

    for locale in ("en", "de", "fr"):
        menu.generate_script(MessageCatalog(locale, {}))
    menu.generate_script(MessageCatalog("de", {}))

    assert cache.locales() == ["fr", "de"]


def test_cache_resize_evicts_oldest() -> None:
    cache = ContextMenuScriptCache(max_entries=3)
    for locale in ("en", "de", "fr"):
        cache.store(locale, locale)
    cache.load("en")

    cache.resize(1)

    assert cache.max_entries == 1
    assert cache.locales() == ["en"]


def test_registry_concatenates_menus_by_type_id(catalog: MessageCatalog) -> None:
    registry = ContextMenuRegistry()
    registry.register(ContextMenu(5, "image", entries=[_entry("lock", 1)], link_builder=_links()))
    registry.register(ContextMenu(1, "plain", entries=[_entry("properties", 1)], link_builder=_links()))

    lines = registry.generate_script(catalog).splitlines()

    assert lines[0].startswith("addMenuEntry(1, ")
    assert lines[1].startswith("addMenuEntry(5, ")
    assert registry.get("image").type_id == 5
    assert len(registry) == 2


def test_registry_invalidate_clears_every_cache(catalog: MessageCatalog) -> None:
    registry = ContextMenuRegistry()
    menu = ContextMenu(1, "plain", entries=[_entry("lock", 1)], link_builder=_links())
    registry.register(menu)
    registry.generate_script(catalog)

    registry.invalidate()

    assert menu.cache.locales() == []


def test_js_string_escapes_quotes_and_script_end() -> None:
    assert js_string('a "b" \\ </script>\n') == 'a \\"b\\" \\\\ <\\/script>\\n'


# The End
