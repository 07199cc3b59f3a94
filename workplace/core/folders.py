# -*- coding: utf-8 -*-
"""
folders

Upload folder lookup driven by inherited resource properties.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, TYPE_CHECKING

from .exceptions import WorkplaceError
from .models import Permission, RequestContext
from .settings import SettingsKey, system_config

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter


class UploadFolderResolver:
    """Find the folder new uploads of a content type should go to."""

    def __init__(
        self,
        repository: "RepositoryAdapter",
        *,
        property_names: Mapping[str, str] | None = None,
    ) -> None:
        """Bind the resolver to ``repository`` and per type property names."""

        self.repository = repository
        self._property_names: Dict[str, str] = dict(property_names or {})
        self.logger = logging.getLogger(__name__)

    def set_property_name(self, content_type: str, property_name: str) -> None:
        """Use ``property_name`` when resolving uploads of ``content_type``."""

        self._property_names[content_type] = property_name

    def property_name(self, content_type: str) -> str:
        """Return the property that stores the upload folder for ``content_type``."""

        configured = self._property_names.get(content_type)
        if configured:
            return configured
        pattern = str(system_config.get_cached(SettingsKey.UPLOAD_FOLDER_PROPERTY))
        return pattern.format(type=content_type)

    def resolve_upload_folder(
        self,
        context: RequestContext,
        reference_resource: str,
        content_type: str,
    ) -> str | None:
        """Return a writable upload folder for ``content_type`` or ``None``.

        The property is searched upwards from ``reference_resource``. The
        folder it names must exist, be a folder, and be writable for the
        current user. Repository failures are logged and yield ``None``.
        """

        name = self.property_name(content_type)
        try:
            folder = self.repository.read_property(reference_resource, name, search=True)
            if not folder:
                return None
            if not folder.endswith("/"):
                folder = f"{folder}/"
            if not self.repository.exists(folder):
                self.logger.debug("Upload folder %s configured by %s does not exist", folder, name)
                return None
            resource = self.repository.read_resource(folder)
            if not resource.is_folder:
                return None
            if not self.repository.has_permission(context.user, folder, Permission.WRITE):
                self.logger.debug("User %s may not write to %s", context.user.name, folder)
                return None
        except WorkplaceError as exc:
            self.logger.warning(
                "Cannot resolve upload folder for %s below %s: %s",
                content_type,
                reference_resource,
                exc,
            )
            return None
        return folder


__all__ = ["UploadFolderResolver"]


# The End
