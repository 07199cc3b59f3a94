# -*- coding: utf-8 -*-
"""
static_export

Run the static export in a background report.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Mapping, TYPE_CHECKING

from ..core.exceptions import PermissionDenied
from ..core.models import RequestContext
from ..core.reports import Report, ReportThread
from .base import ReportDialog

if TYPE_CHECKING:  # pragma: no cover
    from ..adapters.base import RepositoryAdapter
    from ..core.messages import MessageCatalog


EXPORT_ROLE = "export"


class StaticExportThread(ReportThread):
    def __init__(self, repository: "RepositoryAdapter", catalog: "MessageCatalog") -> None:
        super().__init__("workplace-staticexport", locale=catalog.locale)
        self.repository = repository
        self.catalog = catalog

    def work(self) -> None:
        self.report.println(self.catalog.key("report.export.begin"), Report.FORMAT_HEADLINE)
        self.repository.export_static(self.report)
        self.report.println(self.catalog.key("report.export.end"), Report.FORMAT_HEADLINE)


class StaticExportDialog(ReportDialog):
    """Export static resources; members of the export role only."""

    key = "staticexport"
    title_key = "dialog.staticexport.title"

    def create_thread(self, params: Mapping[str, str], context: RequestContext) -> ReportThread:
        if not self.repository.has_role(context.user, EXPORT_ROLE):
            raise PermissionDenied(self.catalog(context).key("error.export.role"))
        return StaticExportThread(self.repository, self.catalog(context))


__all__ = ["EXPORT_ROLE", "StaticExportThread", "StaticExportDialog"]


# The End
