# -*- coding: utf-8 -*-
"""
synchronize

Mirror repository folders to the file system in a background report.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, TYPE_CHECKING

from ..core.exceptions import PermissionDenied, ResourceNotFound, ValidationError
from ..core.models import Permission, RequestContext
from ..core.reports import Report, ReportThread
from .base import ReportDialog

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter
    from ..core.messages import MessageCatalog


def remove_redundancies(paths: Iterable[str]) -> List[str]:
    """Return ``paths`` sorted without entries nested in a listed folder."""

    result: List[str] = []
    for path in sorted(set(paths)):
        if any(kept.endswith("/") and path.startswith(kept) for kept in result):
            continue
        result.append(path)
    return result


def collect_sync_resources(
    repository: "RepositoryAdapter",
    context: RequestContext,
    folders: Iterable[str],
    catalog: "MessageCatalog",
) -> List[str]:
    """Return the folders to synchronize after checking every one of them.

    A single missing, foreign, or read-only folder fails the whole request.
    """

    resources = remove_redundancies(folders)
    for path in resources:
        if not repository.exists(path):
            raise ResourceNotFound(catalog.key("error.resource.missing", path))
        if not repository.is_inside_current_project(path, context.project):
            raise PermissionDenied(catalog.key("error.sync.project", path))
        if not repository.has_permission(context.user, path, Permission.WRITE):
            raise PermissionDenied(catalog.key("error.permission.write", path))
    return resources


class SynchronizeThread(ReportThread):
    """Write each folder into the destination directory."""

    def __init__(
        self,
        repository: "RepositoryAdapter",
        folders: List[str],
        destination: str,
        catalog: "MessageCatalog",
    ) -> None:
        super().__init__("workplace-synchronize", locale=catalog.locale)
        self.repository = repository
        self.folders = folders
        self.destination = destination
        self.catalog = catalog

    def work(self) -> None:
        self.report.println(
            self.catalog.key("report.sync.begin", self.destination), Report.FORMAT_HEADLINE
        )
        for folder in self.folders:
            self.report.println(self.catalog.key("report.sync.folder", folder))
            self.repository.synchronize(folder, self.destination, self.report)
        self.report.println(self.catalog.key("report.sync.end"), Report.FORMAT_HEADLINE)


class SynchronizeDialog(ReportDialog):
    """Start a synchronization of the configured source folders."""

    key = "synchronize"
    title_key = "dialog.synchronize.title"

    def form_fields(self, params: Mapping[str, str], context: RequestContext) -> Dict[str, Any]:
        sync = self.workplace.synchronize
        return {
            "enabled": sync.enabled,
            "destination": sync.destination or "",
            "folders": remove_redundancies(sync.source_folders),
        }

    def create_thread(self, params: Mapping[str, str], context: RequestContext) -> ReportThread:
        catalog = self.catalog(context)
        sync = self.workplace.synchronize
        if not sync.enabled:
            raise ValidationError(catalog.key("error.sync.disabled"))
        if not sync.destination:
            raise ValidationError(catalog.key("error.sync.destination"))
        folders = collect_sync_resources(
            self.repository, context, sync.source_folders, catalog
        )
        if not folders:
            raise ValidationError(catalog.key("error.sync.empty"))
        return SynchronizeThread(self.repository, folders, sync.destination, catalog)


__all__ = [
    "remove_redundancies",
    "collect_sync_resources",
    "SynchronizeThread",
    "SynchronizeDialog",
]


# The End
