# -*- coding: utf-8 -*-
"""
__init__

Core services of the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .exceptions import (
    ConfigurationError,
    HandlerNotFound,
    PermissionDenied,
    RepositoryError,
    ResourceNotFound,
    UnknownTypeError,
    ValidationError,
    WorkplaceError,
)

__all__ = [
    "ConfigurationError",
    "HandlerNotFound",
    "PermissionDenied",
    "RepositoryError",
    "ResourceNotFound",
    "UnknownTypeError",
    "ValidationError",
    "WorkplaceError",
]

# The End
