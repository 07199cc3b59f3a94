# -*- coding: utf-8 -*-
"""Tests for visibility rule expansion and menu entry validation."""

from __future__ import annotations

import pydantic
import pytest

from workplace.core.menu import MenuEntry, MenuEntryKind, expand_rule


RULES = ["aaaaaaaaaa", "dddaaaaiiiiiii", "diaaaaiiiddddd", "aidaidaidaidai", "abcdefghijklmnop"]


@pytest.mark.parametrize("rules", RULES)
@pytest.mark.parametrize("key", ["rename", "properties", "LOCKED", ""])
def test_expand_rule_reuses_locked_columns(rules: str, key: str) -> None:
    expanded = expand_rule(rules, key)

    assert len(expanded) == len(rules) + 4
    assert expanded[:6] == rules[:6]
    assert expanded[6:10] == rules[6:10]
    assert expanded[10:] == rules[6:]


@pytest.mark.parametrize("rules", RULES)
@pytest.mark.parametrize("key", ["lock", "unlock", "Lock", "UNLOCK"])
def test_expand_rule_reuses_unlocked_columns_for_lock_entries(rules: str, key: str) -> None:
    expanded = expand_rule(rules, key)

    assert len(expanded) == len(rules) + 4
    assert expanded[6:10] == rules[2:6]
    assert expanded[10:] == rules[6:]


def test_expand_rule_literal_values() -> None:
    assert expand_rule("dddaaaaiiiiiii", "lock") == "dddaaadaaaaiiiiiii"
    assert expand_rule("diaaaaiiiddddd", "rename") == "diaaaaiiidiiiddddd"


def test_expand_rule_rejects_short_rules() -> None:
    with pytest.raises(ValueError):
        expand_rule("aaaaaaaaa", "rename")


def test_menu_entry_requires_key_and_rule() -> None:
    with pytest.raises(pydantic.ValidationError):
        MenuEntry(key="rename", rules="aaa")
    with pytest.raises(pydantic.ValidationError):
        MenuEntry(rules="aaaaaaaaaaaaaa")


def test_separator_needs_no_rule() -> None:
    entry = MenuEntry.separator(5)

    assert entry.kind == MenuEntryKind.SEPARATOR
    assert entry.is_separator
    assert entry.order == 5


def test_menu_entry_kind_parsed_from_string() -> None:
    entry = MenuEntry.model_validate({"kind": "separator", "order": 1})

    assert entry.is_separator


# The End
