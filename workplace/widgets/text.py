# -*- coding: utf-8 -*-
"""
text

Single and multi line text widgets.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("text")
class TextWidget(BaseWidget):
    """Plain single line input."""

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "string", "title": self.get_title()}
        if not self.ctx.optional:
            schema["minLength"] = 1
        return self.merge_readonly(schema)

    def to_python(self, value: Any) -> Any:
        return "" if value is None else str(value).strip()


@registry.register("textarea")
class TextareaWidget(TextWidget):
    """Multi line text input; ``params`` may hold the row count."""

    def get_schema(self) -> Dict[str, Any]:
        schema = super().get_schema()
        schema["format"] = "textarea"
        rows = (self.ctx.params or "").strip()
        if rows.isdigit():
            schema["options"] = {"input_height": f"{int(rows) * 1.5}em"}
        return schema

# The End
