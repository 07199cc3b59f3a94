# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the workplace core.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class WorkplaceError(Exception):
    """Base class for workplace-specific exceptions."""


class ConfigurationError(WorkplaceError):
    """Raised when a configuration document cannot be loaded."""


class UnknownTypeError(ConfigurationError):
    """Raised when configuration names a type no registry knows about."""


class HandlerNotFound(WorkplaceError):
    """Raised when a dialog handler key is not registered."""


# --- HTTP-like domain errors -------------------------------------------------

class HTTPError(WorkplaceError):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class ValidationError(HTTPError):
    """Raised when dialog input fails validation."""

    status_code = 400


class PermissionDenied(HTTPError):
    """Raised when the current user may not touch a resource."""

    status_code = 403


class ResourceNotFound(HTTPError):
    """Raised when a requested resource does not exist."""

    status_code = 404


class RepositoryError(HTTPError):
    """Raised when the repository fails to read or write."""

    status_code = 500


__all__ = [
    "WorkplaceError",
    "ConfigurationError",
    "UnknownTypeError",
    "HandlerNotFound",
    "HTTPError",
    "ValidationError",
    "PermissionDenied",
    "ResourceNotFound",
    "RepositoryError",
]


# The End
