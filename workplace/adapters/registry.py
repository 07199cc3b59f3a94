# -*- coding: utf-8 -*-
"""
registry

Registry for repository adapters.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Callable, Dict

from ..core.exceptions import ConfigurationError
from .base import RepositoryAdapter
from .memory import MemoryRepository

AdapterFactory = Callable[[], RepositoryAdapter]


class AdapterRegistry:
    """Repository adapter factories addressable by name."""

    def __init__(self) -> None:
        self._factories: Dict[str, AdapterFactory] = {}

    def register(self, name: str, factory: AdapterFactory) -> None:
        """Register ``factory`` under ``name`` replacing a previous one."""
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def get(self, name: str) -> RepositoryAdapter:
        """Return a new adapter built by the factory named ``name``."""
        try:
            factory = self._factories[name]
        except KeyError as exc:
            raise ConfigurationError(f"Repository adapter '{name}' not registered") from exc
        return factory()

    def names(self) -> list[str]:
        return sorted(self._factories)


registry = AdapterRegistry()
registry.register(MemoryRepository.name, MemoryRepository)

__all__ = ["AdapterFactory", "AdapterRegistry", "registry"]

# The End
