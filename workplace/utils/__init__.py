# -*- coding: utf-8 -*-
"""
__init__

Utility helpers for the workplace package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
