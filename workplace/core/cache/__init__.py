# -*- coding: utf-8 -*-
"""
cache

Cache backends for the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .menu import ContextMenuScriptCache

__all__ = ["ContextMenuScriptCache"]


# The End
