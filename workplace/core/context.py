# -*- coding: utf-8 -*-
"""
context

Explicit container wiring the workplace services together.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from ..adapters import MemoryRepository, RepositoryAdapter, registry as adapter_registry
from ..conf import WorkplaceSettings, current_settings
from .accounts import AccountInfo
from .configuration import (
    SynchronizeSettings,
    WorkplaceConfiguration,
    WorkplaceConfigurationLoader,
)
from .events import EventBus, WorkplaceEvent
from .folders import UploadFolderResolver
from .handlers import DialogHandlerRegistry, DialogSelector
from .menu import ContextMenuRegistry
from .messages import MessageBundleLoader, MessageCatalog
from .models import ONLINE_PROJECT, Project, RequestContext, UserAccount
from .reports import ReportManager
from .settings import SettingsKey, system_config
from .userinfo import UserInfoConfiguration


class WorkplaceContext:
    """Own the registries, caches, and workers of one workplace instance.

    The context is created explicitly and handed to the router, the dialogs,
    and the CLI. Nothing in the package keeps a global reference to it.
    """

    def __init__(
        self,
        settings: WorkplaceSettings | None = None,
        *,
        repository: RepositoryAdapter | str | None = None,
        configuration: WorkplaceConfiguration | Mapping[str, Any] | Path | str | None = None,
    ) -> None:
        """Prepare empty registries bound to ``settings`` and ``repository``."""

        self.settings = settings or current_settings()
        self.repository = self._resolve_repository(repository)
        self.logger = logging.getLogger(__name__)
        self.events = EventBus()
        self.reports = ReportManager()
        self.messages = MessageBundleLoader(
            self.settings.bundle_dirs,
            default_locale=self.settings.default_locale,
        )
        self.menus = ContextMenuRegistry()
        self.handlers = DialogHandlerRegistry()
        self.selector = DialogSelector(
            self.handlers, fallback_uri=self.settings.fallback_dialog_uri
        )
        self.userinfo = UserInfoConfiguration()
        self.account_infos: List[AccountInfo] = []
        self.folders = UploadFolderResolver(self.repository)
        self.synchronize = SynchronizeSettings(
            enabled=self.settings.sync_enabled,
            destination=self.settings.sync_destination,
            source_folders=list(self.settings.sync_source_folders),
        )
        self._configuration = configuration
        self._initialized = False

    @staticmethod
    def _resolve_repository(repository: RepositoryAdapter | str | None) -> RepositoryAdapter:
        if repository is None:
            return MemoryRepository()
        if isinstance(repository, str):
            return adapter_registry.get(repository)
        return repository

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> "WorkplaceContext":
        """Publish settings, load the configuration, and subscribe listeners."""

        if self._initialized:
            return self
        self._publish_settings()
        configuration = self._configuration
        if configuration is None and self.settings.config_path is not None:
            configuration = self.settings.config_path
        if configuration is not None:
            self.apply_configuration(self._load(configuration))
        self.events.subscribe(WorkplaceEvent.REINIT_WORKPLACE, self._on_reinit)
        self._initialized = True
        self.logger.info(
            "Workplace initialized with %d context menu(s) and %d dialog handler(s)",
            len(self.menus),
            len(self.handlers.keys()),
        )
        return self

    def shutdown(self, timeout: float | None = 5.0) -> None:
        """Stop report workers and drop every cache."""

        if not self._initialized:
            return
        self.events.unsubscribe(WorkplaceEvent.REINIT_WORKPLACE, self._on_reinit)
        self.reports.shutdown(timeout)
        self.menus.invalidate()
        self.messages.clear()
        self._initialized = False
        self.logger.info("Workplace shut down")

    def apply_configuration(self, configuration: WorkplaceConfiguration) -> None:
        """Replace the registries with those of ``configuration``."""

        if configuration.settings:
            system_config.load(configuration.settings)
        self.menus.clear()
        for menu in configuration.menus:
            self.menus.register(menu)
        self.handlers.clear()
        for key in configuration.handlers.keys():
            self.handlers.register(key, configuration.handlers.get(key))
        self.userinfo = configuration.userinfo
        self.account_infos = list(configuration.account_infos)
        for content_type, property_name in configuration.upload_folders.items():
            self.folders.set_property_name(content_type, property_name)
        if configuration.synchronize is not None:
            self.synchronize = configuration.synchronize

    def catalog(self, locale: str | None = None) -> MessageCatalog:
        """Return the message catalog for ``locale``."""

        return self.messages.catalog(locale or self.settings.default_locale)

    def request_context(
        self,
        user: UserAccount,
        *,
        project: Project | None = None,
        locale: str | None = None,
        uri: str = "/",
        params: Mapping[str, str] | None = None,
    ) -> RequestContext:
        """Build the per-request state dialogs and resolvers work with."""

        return RequestContext(
            user=user,
            project=project or ONLINE_PROJECT,
            locale=MessageBundleLoader.normalize_locale(locale or self.settings.default_locale),
            uri=uri,
            encoding=str(system_config.get_cached(SettingsKey.DEFAULT_ENCODING)),
            params=dict(params or {}),
        )

    def user_info_schema(self, user: UserAccount) -> Dict[str, Any]:
        """Return the user info form of ``user``; non-editable account fields are read only."""

        readonly = {
            info.add_info_key
            for info in self.account_infos
            if info.is_additional_info() and not info.editable
        }
        return self.userinfo.build_schema(user.additional_info, readonly=readonly)

    def _load(
        self, configuration: WorkplaceConfiguration | Mapping[str, Any] | Path | str
    ) -> WorkplaceConfiguration:
        if isinstance(configuration, WorkplaceConfiguration):
            return configuration
        loader = WorkplaceConfigurationLoader(
            self.repository, menu_cache_size=self.settings.menu_cache_size
        )
        return loader.load(configuration)

    def _publish_settings(self) -> None:
        system_config.set(SettingsKey.CONTEXT_PATH, self.settings.context_path)
        system_config.set(SettingsKey.DEFAULT_LOCALE, self.settings.default_locale)
        system_config.set(SettingsKey.FALLBACK_DIALOG_URI, self.settings.fallback_dialog_uri)
        system_config.set(SettingsKey.MENU_CACHE_SIZE, self.settings.menu_cache_size)
        system_config.set(SettingsKey.REPORT_POLL_INTERVAL, self.settings.report_poll_interval)

    def _on_reinit(self, event: WorkplaceEvent, payload: Mapping[str, Any]) -> None:
        self.menus.invalidate()
        self.messages.clear()
        self.logger.info("Workplace caches cleared by %s", payload.get("user", "system"))


__all__ = ["WorkplaceContext"]


# The End
