# -*- coding: utf-8 -*-
"""
__init__

Application assembly helpers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .factory import ApplicationFactory

__all__ = ["ApplicationFactory"]

# The End
