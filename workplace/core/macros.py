# -*- coding: utf-8 -*-
"""
macros

Resolution of ``${...}`` macros against messages, the request, and the user.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, TYPE_CHECKING

from .exceptions import WorkplaceError
from .messages import MessageCatalog
from .models import RequestContext, parent_folder

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter


logger = logging.getLogger(__name__)


class MacroResolver:
    """Replace ``${name}`` tokens in text.

    Lookups run in a fixed order: localized ``key.`` messages, request
    parameters, resource properties, current user and request values, the
    current time, and finally macros added through :meth:`add_macro`.
    Unknown macros are dropped unless ``keep_empty_macros`` is set.
    """

    MACRO_DELIMITER = "$"
    MACRO_START = "{"
    MACRO_END = "}"

    KEY_LOCALIZED_PREFIX = "key."
    KEY_REQUEST_PARAM = "param."
    KEY_PROPERTY = "property."
    KEY_CURRENT_TIME = "currenttime"

    KEY_CURRENT_USER_NAME = "currentuser.name"
    KEY_CURRENT_USER_FIRSTNAME = "currentuser.firstname"
    KEY_CURRENT_USER_LASTNAME = "currentuser.lastname"
    KEY_CURRENT_USER_FULLNAME = "currentuser.fullname"
    KEY_CURRENT_USER_EMAIL = "currentuser.email"
    KEY_CURRENT_USER_STREET = "currentuser.street"
    KEY_CURRENT_USER_ZIP = "currentuser.zip"
    KEY_CURRENT_USER_CITY = "currentuser.city"

    KEY_REQUEST_URI = "request.uri"
    KEY_REQUEST_FOLDER = "request.folder"
    KEY_REQUEST_LOCALE = "request.locale"
    KEY_REQUEST_ENCODING = "request.encoding"

    def __init__(
        self,
        *,
        messages: MessageCatalog | None = None,
        context: RequestContext | None = None,
        repository: "RepositoryAdapter | None" = None,
        keep_empty_macros: bool = False,
    ) -> None:
        """Bind the resolver to the optional lookup sources."""

        self.messages = messages
        self.context = context
        self.repository = repository
        self.keep_empty_macros = keep_empty_macros
        self._additional: Dict[str, str] = {}
        self._request_values: Dict[str, Callable[[RequestContext], str | None]] = {
            self.KEY_CURRENT_USER_NAME: lambda ctx: ctx.user.name,
            self.KEY_CURRENT_USER_FIRSTNAME: lambda ctx: ctx.user.firstname,
            self.KEY_CURRENT_USER_LASTNAME: lambda ctx: ctx.user.lastname,
            self.KEY_CURRENT_USER_FULLNAME: lambda ctx: ctx.user.fullname,
            self.KEY_CURRENT_USER_EMAIL: lambda ctx: ctx.user.email,
            self.KEY_CURRENT_USER_STREET: lambda ctx: ctx.user.address,
            self.KEY_CURRENT_USER_ZIP: lambda ctx: ctx.user.zipcode,
            self.KEY_CURRENT_USER_CITY: lambda ctx: ctx.user.city,
            self.KEY_REQUEST_URI: lambda ctx: ctx.uri,
            self.KEY_REQUEST_FOLDER: lambda ctx: parent_folder(ctx.uri) or "/",
            self.KEY_REQUEST_LOCALE: lambda ctx: ctx.locale,
            self.KEY_REQUEST_ENCODING: lambda ctx: ctx.encoding,
        }

    def add_macro(self, key: str, value: str) -> "MacroResolver":
        """Register a custom macro returning ``value``."""

        self._additional[key] = value
        return self

    def set_keep_empty_macros(self, keep: bool) -> "MacroResolver":
        """Control whether unknown macros stay in the output."""

        self.keep_empty_macros = keep
        return self

    def resolve_macros(self, text: str | None) -> str | None:
        """Resolve macros in ``text`` until the result stops changing."""

        if text is None:
            return None
        result = text
        while True:
            last = result
            result = self.resolve_once(result)
            if result == last:
                return result

    def resolve_once(self, text: str) -> str:
        """Run a single left-to-right resolution pass over ``text``."""

        length = len(text)
        if length < 3:
            return text
        position = text.find(self.MACRO_DELIMITER)
        if position == -1:
            return text

        parts = [text[:position]]
        resolved_any = False
        while position < length:
            start = position + 1
            if start + 1 >= length:
                parts.append(text[position:])
                break
            following = text.find(self.MACRO_DELIMITER, start)
            if following == -1:
                following = length
            end = position
            if text[start] == self.MACRO_START:
                closing = text.find(self.MACRO_END, position)
                if 0 < closing < following:
                    value = self.get_macro_value(text[start + 1 : closing])
                    end = closing + 1
                    if value is not None:
                        parts.append(value)
                        resolved_any = True
                    elif self.keep_empty_macros:
                        parts.append(text[position:end])
            parts.append(text[end:following])
            position = following

        if not resolved_any and self.keep_empty_macros:
            return text
        return "".join(parts)

    def get_macro_value(self, macro: str) -> str | None:
        """Return the value of ``macro`` or ``None`` if it is unknown."""

        if self.messages is not None and macro.startswith(self.KEY_LOCALIZED_PREFIX):
            return self.messages.key_with_params(macro[len(self.KEY_LOCALIZED_PREFIX) :])

        context = self.context
        if context is not None:
            if macro.startswith(self.KEY_REQUEST_PARAM):
                return context.params.get(macro[len(self.KEY_REQUEST_PARAM) :])
            if macro.startswith(self.KEY_PROPERTY):
                return self._read_property(context.uri, macro[len(self.KEY_PROPERTY) :])
            getter = self._request_values.get(macro)
            if getter is not None:
                value = getter(context)
                return None if value is None else str(value)

        if macro == self.KEY_CURRENT_TIME:
            return str(int(time.time() * 1000))

        return self._additional.get(macro)

    def _read_property(self, uri: str, name: str) -> str | None:
        if self.repository is None:
            return None
        try:
            return self.repository.read_property(uri, name, search=True)
        except WorkplaceError as exc:
            logger.debug("Property macro %s on %s not resolved: %s", name, uri, exc)
            return None


def resolve_macros(text: str | None, messages: MessageCatalog) -> str | None:
    """Resolve ``key.`` macros in ``text`` against ``messages`` only."""

    return MacroResolver(messages=messages).resolve_macros(text)


__all__ = ["MacroResolver", "resolve_macros"]


# The End
