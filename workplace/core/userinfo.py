# -*- coding: utf-8 -*-
"""
userinfo

Descriptions of additional user profile fields grouped into blocks.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Iterator, List

from pydantic import BaseModel, ConfigDict, Field as PField

from ..widgets import BaseWidget, WidgetContext, registry as widget_registry
from .exceptions import UnknownTypeError


class ValueTypeRegistry:
    """Map declared value type names to converter callables."""

    def __init__(self) -> None:
        self._types: Dict[str, Callable[[Any], Any]] = {}

    def register(self, converter: Callable[[Any], Any], *names: str) -> None:
        """Register ``converter`` under every name in ``names``."""

        for name in names:
            self._types[name.lower()] = converter

    def resolve(self, name: str) -> Callable[[Any], Any]:
        """Return the converter for ``name`` or raise ``UnknownTypeError``."""

        converter = self._types.get((name or "").strip().lower())
        if converter is None:
            raise UnknownTypeError(f"Unknown user info value type {name!r}")
        return converter

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._types


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


value_types = ValueTypeRegistry()
value_types.register(str, "string", "str", "java.lang.string")
value_types.register(int, "int", "integer", "java.lang.integer", "java.lang.long")
value_types.register(float, "float", "double", "java.lang.float", "java.lang.double")
value_types.register(Decimal, "decimal", "java.math.bigdecimal")
value_types.register(_to_bool, "bool", "boolean", "java.lang.boolean")
value_types.register(date.fromisoformat, "date", "java.util.date")


class UserInfoEntry(BaseModel):
    """Single additional info field shown in the account editor."""

    model_config = ConfigDict(frozen=True)

    key: str
    type_name: str = "string"
    widget_name: str | None = None
    params: str | None = None
    optional: bool = False

    @property
    def value_type(self) -> Callable[[Any], Any]:
        """Return the converter for the declared value type."""
        return value_types.resolve(self.type_name)

    def convert(self, raw: Any) -> Any:
        """Convert ``raw`` to the declared value type; empty stays ``None``."""

        if raw is None or raw == "":
            return None
        return self.value_type(raw)

    def build_widget(
        self, *, label: str | None = None, value: Any = None, readonly: bool = False
    ) -> BaseWidget:
        """Return the configured widget or the default one."""

        ctx = WidgetContext(
            name=self.key,
            label=label,
            value=value,
            params=self.params,
            optional=self.optional,
            readonly=readonly,
        )
        return widget_registry.create(self.widget_name, ctx)


class UserInfoBlock(BaseModel):
    """Labeled group of :class:`UserInfoEntry` items."""

    model_config = ConfigDict(frozen=True)

    title: str
    entries: List[UserInfoEntry] = PField(default_factory=list)


class UserInfoConfiguration:
    """Validated collection of user info blocks."""

    def __init__(self, blocks: Iterable[UserInfoBlock] = ()) -> None:
        """Store ``blocks`` after checking every declared value type."""

        self._blocks: List[UserInfoBlock] = []
        for block in blocks:
            self.add_block(block)

    def add_block(self, block: UserInfoBlock) -> None:
        """Append ``block``; unknown value types raise ``UnknownTypeError``."""

        for entry in block.entries:
            value_types.resolve(entry.type_name)
        self._blocks.append(block)

    @property
    def blocks(self) -> tuple[UserInfoBlock, ...]:
        return tuple(self._blocks)

    def iter_entries(self) -> Iterator[UserInfoEntry]:
        for block in self._blocks:
            yield from block.entries

    def get_entry(self, key: str) -> UserInfoEntry | None:
        for entry in self.iter_entries():
            if entry.key == key:
                return entry
        return None

    def build_schema(
        self, values: Dict[str, Any] | None = None, *, readonly: Iterable[str] = ()
    ) -> Dict[str, Any]:
        """Return a JSON Schema describing every entry grouped by block.

        Entries whose key is in ``readonly`` are marked read only.
        """

        values = values or {}
        locked = set(readonly)
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for block in self._blocks:
            for entry in block.entries:
                widget = entry.build_widget(value=values.get(entry.key), readonly=entry.key in locked)
                fragment = widget.get_schema()
                fragment["group"] = block.title
                start = widget.get_startval()
                if start is not None:
                    fragment["default"] = start
                properties[entry.key] = fragment
                if not entry.optional:
                    required.append(entry.key)
        return {"type": "object", "properties": properties, "required": required}


__all__ = [
    "ValueTypeRegistry",
    "value_types",
    "UserInfoEntry",
    "UserInfoBlock",
    "UserInfoConfiguration",
]


# The End
