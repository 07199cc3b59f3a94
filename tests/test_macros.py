# -*- coding: utf-8 -*-
"""Tests for macro resolution and message catalogs."""

from __future__ import annotations

import json

from workplace.core.macros import MacroResolver, resolve_macros
from workplace.core.messages import MessageBundleLoader, MessageCatalog


def test_key_macros_with_parameters(catalog: MessageCatalog) -> None:
    text = "${key.greeting|Eddie|3}!"

    assert resolve_macros(text, catalog) == "Hello Eddie, you have 3 messages!"


def test_unknown_macros_are_removed(catalog: MessageCatalog) -> None:
    assert resolve_macros("a${key.missing}b${nothing}c", catalog) == "abc"


def test_unknown_macros_kept_on_request(catalog: MessageCatalog) -> None:
    resolver = MacroResolver(messages=catalog, keep_empty_macros=True)

    assert resolver.resolve_macros("x ${unknown} y") == "x ${unknown} y"
    assert resolver.resolve_macros("${key.lock} ${unknown}") == "Lock ${unknown}"


def test_text_without_macros_is_untouched(catalog: MessageCatalog) -> None:
    for text in ("", "ab", "plain text", "costs $5", "${", "${unclosed"):
        assert resolve_macros(text, catalog) == text


def test_nested_macros_resolve_until_stable() -> None:
    resolver = MacroResolver()
    resolver.add_macro("inner", "${outer}")
    resolver.add_macro("outer", "done")

    assert resolver.resolve_macros("[${inner}]") == "[done]"


def test_request_and_user_macros(workplace, repository) -> None:
    context = workplace.request_context(
        repository.read_user("editor"),
        locale="de_de",
        uri="/sites/default/news/a.html",
        params={"mode": "edit"},
    )
    resolver = MacroResolver(context=context, repository=repository)

    text = (
        "${currentuser.fullname}|${currentuser.city}|${currentuser.zip}|"
        "${currentuser.street}|${request.folder}|${request.locale}|${param.mode}"
    )

    assert resolver.resolve_macros(text) == (
        "Eddie Editor|Berlin|10115|Main Street 1|/sites/default/news/|de_DE|edit"
    )


def test_property_macro_searches_parents(workplace, repository) -> None:
    context = workplace.request_context(
        repository.read_user("editor"), uri="/sites/default/news/a.html"
    )
    resolver = MacroResolver(context=context, repository=repository)

    assert resolver.resolve_macros("${property.upload.folder.image}") == "/sites/default/images/"
    assert resolver.resolve_macros("[${property.none}]") == "[]"


def test_property_macro_on_missing_resource(workplace, repository) -> None:
    context = workplace.request_context(repository.read_user("editor"), uri="/missing.html")

    assert MacroResolver(context=context, repository=repository).resolve_macros("${property.x}") == ""


def test_current_time_macro() -> None:
    assert MacroResolver().resolve_macros("${currenttime}").isdigit()


def test_catalog_lookups() -> None:
    catalog = MessageCatalog("en", {"a": "A {0}"})

    assert catalog.key("a", 1) == "A 1"
    assert catalog.key("b") == "???b???"
    assert catalog.resolve("b") is None
    assert catalog.key_with_params("b|1") is None
    assert "a" in catalog


def test_bundle_loader_fallback_chain(tmp_path) -> None:
    (tmp_path / "en.json").write_text(json.dumps({"a": "en-a", "b": "en-b", "c": "en-c"}), encoding="utf-8")
    (tmp_path / "de.json").write_text(json.dumps({"a": "de-a", "b": "de-b"}), encoding="utf-8")
    (tmp_path / "de_AT.json").write_text(json.dumps({"a": "at-a"}), encoding="utf-8")
    loader = MessageBundleLoader([tmp_path], include_builtin=False)

    catalog = loader.catalog("de-at")

    assert catalog.locale == "de_AT"
    assert [catalog.key(name) for name in "abc"] == ["at-a", "de-b", "en-c"]
    assert loader.catalog("de_AT") is catalog


def test_bundle_loader_skips_invalid_bundles(tmp_path) -> None:
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "fr.json").write_text("[1, 2]", encoding="utf-8")
    loader = MessageBundleLoader([tmp_path], include_builtin=False)

    assert loader.catalog("fr").resolve("anything") is None


def test_builtin_bundles_are_loaded() -> None:
    loader = MessageBundleLoader()

    assert loader.catalog("de").key("rename") == "Umbenennen"
    assert loader.catalog("it").key("rename") == "Rename"


# The End
