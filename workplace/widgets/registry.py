# -*- coding: utf-8 -*-
"""
registry

Widget registry.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Dict, Type

from .base import BaseWidget, WidgetContext


logger = logging.getLogger(__name__)


class WidgetRegistry:
    """Map symbolic widget names to widget classes."""

    DEFAULT_KEY = "text"

    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, key: str):
        """Decorator to register a widget by key."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def keys(self) -> list[str]:
        return sorted(self._by_key)

    def create(self, key: str | None, ctx: WidgetContext) -> BaseWidget:
        """Instantiate widget ``key`` falling back to the default widget.

        Unknown names and constructor failures are logged, never raised.
        """

        widget_cls = self._by_key.get(key or self.DEFAULT_KEY)
        if widget_cls is None:
            logger.warning("Unknown widget %r for %s, using %s", key, ctx.name, self.DEFAULT_KEY)
        else:
            try:
                return widget_cls(ctx)
            except (TypeError, ValueError) as exc:
                logger.warning("Widget %r failed for %s: %s", key, ctx.name, exc)
        return self._by_key[self.DEFAULT_KEY](ctx)


registry = WidgetRegistry()

# The End
