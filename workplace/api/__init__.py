# -*- coding: utf-8 -*-
"""
__init__

HTTP surface of the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .views import ProjectResolver, UserResolver, WorkplaceRouter

__all__ = ["WorkplaceRouter", "UserResolver", "ProjectResolver"]

# The End
