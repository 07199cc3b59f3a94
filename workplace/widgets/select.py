# -*- coding: utf-8 -*-
"""
select

Select widget with options taken from the widget parameters.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, List, Tuple

from .base import BaseWidget, WidgetContext
from .registry import registry


@registry.register("select")
class SelectWidget(BaseWidget):
    """Drop-down built from ``value[:label]|value[:label]`` parameters."""

    def __init__(self, ctx: WidgetContext) -> None:
        super().__init__(ctx)
        self.options = self.parse_options(ctx.params)
        if not self.options:
            raise ValueError("select widget needs at least one option")

    @staticmethod
    def parse_options(params: str | None) -> List[Tuple[str, str]]:
        options: List[Tuple[str, str]] = []
        for chunk in (params or "").split("|"):
            chunk = chunk.strip()
            if not chunk:
                continue
            value, _, label = chunk.partition(":")
            options.append((value.strip(), label.strip() or value.strip()))
        return options

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "string",
            "title": self.get_title(),
            "enum": [value for value, _ in self.options],
            "options": {"enum_titles": [label for _, label in self.options]},
        }
        return self.merge_readonly(schema)

# The End
