# -*- coding: utf-8 -*-
"""
configuration

Load the workplace JSON document into menus, handlers, and field descriptions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, TYPE_CHECKING

import pydantic
from pydantic import BaseModel, ConfigDict, Field as PField

from .accounts import AccountInfo
from .cache.menu import ContextMenuScriptCache
from .exceptions import ConfigurationError
from .handlers import DialogHandlerRegistry, handler_factories
from .menu import ContextMenu, ContextMenuRegistry, MenuEntry
from .userinfo import UserInfoBlock, UserInfoConfiguration

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter


logger = logging.getLogger(__name__)


class ContextMenuDocument(BaseModel):
    """Context menu section of one resource type."""

    model_config = ConfigDict(extra="forbid")

    type_id: int
    type_name: str
    entries: List[MenuEntry] = PField(default_factory=list)


class DialogHandlerDocument(BaseModel):
    """Dialog handler declaration: a key and a named handler factory."""

    model_config = ConfigDict(extra="forbid")

    key: str
    handler: str
    options: Dict[str, Any] = PField(default_factory=dict)


class AccountInfoDocument(BaseModel):
    """Account field shown in the user editor."""

    model_config = ConfigDict(extra="forbid")

    field: str
    addinfo: str | None = None
    editable: bool | str | None = None


class SynchronizeSettings(BaseModel):
    """Folders mirrored to the file system and where they go."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    destination: str | None = None
    source_folders: List[str] = PField(default_factory=list)


class WorkplaceDocument(BaseModel):
    """Root of the workplace configuration document."""

    model_config = ConfigDict(extra="forbid")

    settings: Dict[str, Any] = PField(default_factory=dict)
    contextmenus: List[ContextMenuDocument] = PField(default_factory=list)
    dialoghandlers: List[DialogHandlerDocument] = PField(default_factory=list)
    userinfo: List[UserInfoBlock] = PField(default_factory=list)
    accountinfos: List[AccountInfoDocument] = PField(default_factory=list)
    uploadfolders: Dict[str, str] = PField(default_factory=dict)
    synchronize: SynchronizeSettings | None = None


@dataclass
class WorkplaceConfiguration:
    """Registries built from a :class:`WorkplaceDocument`."""

    menus: ContextMenuRegistry = field(default_factory=ContextMenuRegistry)
    handlers: DialogHandlerRegistry = field(default_factory=DialogHandlerRegistry)
    userinfo: UserInfoConfiguration = field(default_factory=UserInfoConfiguration)
    account_infos: List[AccountInfo] = field(default_factory=list)
    upload_folders: Dict[str, str] = field(default_factory=dict)
    synchronize: SynchronizeSettings | None = None
    settings: Dict[str, Any] = field(default_factory=dict)


class WorkplaceConfigurationLoader:
    """Read, validate, and build workplace configuration documents."""

    def __init__(self, repository: "RepositoryAdapter", *, menu_cache_size: int = 16) -> None:
        """Bind the loader to the repository handed to dialog handlers."""

        self.repository = repository
        self.menu_cache_size = menu_cache_size

    def load(self, source: Path | str | Mapping[str, Any]) -> WorkplaceConfiguration:
        """Return the configuration read from a file path or a mapping."""

        if isinstance(source, Mapping):
            document = self.parse(source)
        else:
            document = self.read(source)
        return self.build(document)

    def read(self, path: Path | str) -> WorkplaceDocument:
        """Parse the JSON document stored at ``path``."""

        location = Path(path)
        try:
            data = json.loads(location.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError(f"Cannot read workplace configuration {location}: {exc}") from exc
        except ValueError as exc:
            raise ConfigurationError(f"Invalid JSON in {location}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Workplace configuration {location} must be a JSON object")
        logger.info("Loading workplace configuration from %s", location)
        return self.parse(data)

    def parse(self, data: Mapping[str, Any]) -> WorkplaceDocument:
        """Validate ``data`` against the document schema."""

        try:
            return WorkplaceDocument.model_validate(dict(data))
        except pydantic.ValidationError as exc:
            raise ConfigurationError(f"Invalid workplace configuration: {exc}") from exc

    def build(self, document: WorkplaceDocument) -> WorkplaceConfiguration:
        """Turn ``document`` into registries.

        Unknown handler and value type names raise ``UnknownTypeError``.
        """

        config = WorkplaceConfiguration(
            upload_folders=dict(document.uploadfolders),
            synchronize=document.synchronize,
            settings=dict(document.settings),
        )
        for section in document.contextmenus:
            menu = ContextMenu(
                section.type_id,
                section.type_name,
                cache=ContextMenuScriptCache(self.menu_cache_size),
            )
            menu.add_entries(section.entries)
            config.menus.register(menu)
        for declaration in document.dialoghandlers:
            try:
                handler = handler_factories.create(
                    declaration.handler, declaration.options, self.repository
                )
            except ValueError as exc:
                raise ConfigurationError(
                    f"Dialog handler {declaration.key!r} is misconfigured: {exc}"
                ) from exc
            config.handlers.register(declaration.key, handler)
        for block in document.userinfo:
            config.userinfo.add_block(block)
        for item in document.accountinfos:
            try:
                info = AccountInfo.from_strings(item.field, item.addinfo, item.editable)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc
            config.account_infos.append(info)
        logger.debug(
            "Workplace configuration: %d menu(s), %d handler(s), %d user info block(s)",
            len(config.menus),
            len(config.handlers.keys()),
            len(config.userinfo.blocks),
        )
        return config


__all__ = [
    "ContextMenuDocument",
    "DialogHandlerDocument",
    "AccountInfoDocument",
    "SynchronizeSettings",
    "WorkplaceDocument",
    "WorkplaceConfiguration",
    "WorkplaceConfigurationLoader",
]


# The End
