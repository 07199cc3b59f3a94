# -*- coding: utf-8 -*-
"""
handlers

Dialog handlers and the selector that maps a handler key to a dialog URI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, TYPE_CHECKING
from urllib.parse import unquote

from .exceptions import HandlerNotFound, UnknownTypeError
from .models import RequestContext
from .settings import SettingsKey, system_config

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter


logger = logging.getLogger(__name__)


class DialogHandler(ABC):
    """Compute the dialog URI opened for a resource."""

    @abstractmethod
    def get_dialog_uri(self, resource_path: str, context: RequestContext | None = None) -> str:
        """Return the URI of the dialog handling ``resource_path``."""


class StaticDialogHandler(DialogHandler):
    """Always answer with the same dialog URI."""

    def __init__(self, uri: str) -> None:
        if not uri:
            raise ValueError("static dialog handlers need a uri")
        self.uri = uri

    def get_dialog_uri(self, resource_path: str, context: RequestContext | None = None) -> str:
        return self.uri


class ResourceTypeDialogHandler(DialogHandler):
    """Pick the dialog URI by the type of the addressed resource."""

    def __init__(
        self,
        repository: "RepositoryAdapter",
        default: str,
        types: Mapping[str, str] | None = None,
    ) -> None:
        """Bind the handler to ``repository`` and the type to URI table."""

        self.repository = repository
        self.default = default
        self.types = dict(types or {})

    def get_dialog_uri(self, resource_path: str, context: RequestContext | None = None) -> str:
        resource = self.repository.read_resource(resource_path)
        return self.types.get(resource.type_name, self.default)


HandlerFactory = Callable[[Mapping[str, Any], "RepositoryAdapter"], DialogHandler]


class DialogHandlerFactoryRegistry:
    """Build dialog handlers from their configured name and options."""

    def __init__(self) -> None:
        self._factories: Dict[str, HandlerFactory] = {}

    def register(self, name: str, factory: HandlerFactory) -> None:
        """Register ``factory`` under ``name``."""

        self._factories[name.lower()] = factory

    def names(self) -> list[str]:
        return sorted(self._factories)

    def create(
        self,
        name: str,
        options: Mapping[str, Any],
        repository: "RepositoryAdapter",
    ) -> DialogHandler:
        """Instantiate handler ``name`` or raise ``UnknownTypeError``."""

        factory = self._factories.get((name or "").lower())
        if factory is None:
            raise UnknownTypeError(f"Unknown dialog handler {name!r}")
        return factory(options, repository)


handler_factories = DialogHandlerFactoryRegistry()
handler_factories.register(
    "static",
    lambda options, repository: StaticDialogHandler(str(options.get("uri") or "")),
)
handler_factories.register(
    "resourcetype",
    lambda options, repository: ResourceTypeDialogHandler(
        repository,
        str(options.get("default") or ""),
        options.get("types") or {},
    ),
)


class DialogHandlerRegistry:
    """Dialog handlers keyed by their handler key."""

    def __init__(self) -> None:
        self._handlers: Dict[str, DialogHandler] = {}

    def register(self, key: str, handler: DialogHandler) -> None:
        """Register ``handler`` for ``key`` replacing any previous one."""

        self._handlers[key] = handler

    def get(self, key: str) -> DialogHandler:
        """Return the handler for ``key`` or raise ``HandlerNotFound``."""

        try:
            return self._handlers[key]
        except KeyError as exc:
            raise HandlerNotFound(f"No dialog handler registered for {key!r}") from exc

    def keys(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def clear(self) -> None:
        self._handlers.clear()


class DialogSelector:
    """Resolve the dialog URI for a handler key and a resource parameter.

    Unknown keys and failing handlers never surface to the caller; the
    configured fallback URI is returned instead and the failure is logged.
    """

    def __init__(
        self,
        handlers: DialogHandlerRegistry,
        *,
        fallback_uri: str | None = None,
    ) -> None:
        """Bind the selector to ``handlers``."""

        self.handlers = handlers
        self._fallback_uri = fallback_uri

    @property
    def fallback_uri(self) -> str:
        if self._fallback_uri:
            return self._fallback_uri
        return str(system_config.get_cached(SettingsKey.FALLBACK_DIALOG_URI))

    def resolve(
        self,
        handler_key: str,
        resource_param: str | None,
        context: RequestContext | None = None,
    ) -> str:
        """Return the dialog URI for ``handler_key`` and the encoded resource."""

        resource_path = unquote(resource_param or "")
        try:
            handler = self.handlers.get(handler_key)
        except HandlerNotFound:
            logger.warning("Dialog handler %r not found, using fallback", handler_key)
            return self.fallback_uri
        try:
            return handler.get_dialog_uri(resource_path, context)
        except Exception as exc:  # noqa: BLE001 - handlers are third party code
            logger.error(
                "Dialog handler %r failed for %s: %s", handler_key, resource_path, exc
            )
            return self.fallback_uri


__all__ = [
    "DialogHandler",
    "StaticDialogHandler",
    "ResourceTypeDialogHandler",
    "DialogHandlerFactoryRegistry",
    "handler_factories",
    "DialogHandlerRegistry",
    "DialogSelector",
]


# The End
