# -*- coding: utf-8 -*-
"""
checkbox

Checkbox widget.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("checkbox")
class CheckboxWidget(BaseWidget):
    """Boolean toggle stored as ``"true"``/``"false"``."""

    def get_schema(self) -> Dict[str, Any]:
        schema = {"type": "boolean", "title": self.get_title(), "format": "checkbox"}
        return self.merge_readonly(schema)

    def to_python(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        return str(value or "").strip().lower() in {"1", "true", "on", "yes"}


# The End
