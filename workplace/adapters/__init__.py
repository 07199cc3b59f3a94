# -*- coding: utf-8 -*-
"""
__init__

Repository adapters backing the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import RepositoryAdapter
from .memory import MemoryRepository
from .registry import AdapterRegistry, registry

__all__ = ["RepositoryAdapter", "MemoryRepository", "AdapterRegistry", "registry"]

# The End
