# -*- coding: utf-8 -*-
"""
__init__

Jinja2 templates of the workplace dialogs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .rendering import DialogTemplateRenderer

__all__ = ["DialogTemplateRenderer"]

# The End
