# -*- coding: utf-8 -*-
"""
__init__

Input widgets describing user info fields.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseWidget, WidgetContext
from .registry import WidgetRegistry, registry
from .text import TextareaWidget, TextWidget
from .checkbox import CheckboxWidget
from .select import SelectWidget

__all__ = [
    "BaseWidget",
    "WidgetContext",
    "WidgetRegistry",
    "registry",
    "TextWidget",
    "TextareaWidget",
    "CheckboxWidget",
    "SelectWidget",
]

# The End
