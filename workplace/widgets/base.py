# -*- coding: utf-8 -*-
"""
base

Base class of the widgets describing user info fields.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class WidgetContext:
    """Field name, label, stored value and widget parameters."""

    name: str
    label: str | None = None
    value: Any = None
    params: str | None = None
    optional: bool = False
    readonly: bool = False


class BaseWidget(ABC):
    """
    Describe one user info field as a JSON Schema fragment.

    The ``params`` string of the configuration entry is widget specific,
    e.g. the options of a select or the row count of a textarea.
    """

    key: str = "base"

    def __init__(self, ctx: WidgetContext) -> None:
        self.ctx = ctx

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Return the schema fragment of this field."""

    def get_title(self) -> str:
        """Return the label, or the field name made readable."""

        if self.ctx.label:
            return self.ctx.label
        words = self.ctx.name.replace("_", " ").replace(".", " ")
        return words[:1].upper() + words[1:]

    def merge_readonly(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        if self.ctx.readonly:
            schema["readonly"] = True
        return schema

    def get_startval(self) -> Any:
        """Return the stored value converted for the form, ``None`` if unset."""

        if self.ctx.value is None:
            return None
        return self.to_python(self.ctx.value)

    def to_python(self, value: Any) -> Any:
        return value


# The End
