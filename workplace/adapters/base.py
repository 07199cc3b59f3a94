# -*- coding: utf-8 -*-
"""
base

Repository adapter interface consumed by the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..core.models import Permission, Project, Resource, ResourceVersion, UserAccount

if TYPE_CHECKING:  # pragma: no cover
    from ..core.reports import Report


class RepositoryAdapter(ABC):
    """Bridge between workplace dialogs and a content repository.

    Implementations raise subclasses of
    :class:`~workplace.core.exceptions.WorkplaceError` for every failure so
    dialogs can render a diagnostic view without knowing the backend.
    """

    name: str = "base"

    @abstractmethod
    def read_resource(self, path: str) -> Resource:
        """Return the resource stored at ``path``."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return ``True`` when a resource exists at ``path``."""

    @abstractmethod
    def read_user(self, name: str) -> UserAccount:
        """Return the user account registered under ``name``."""

    @abstractmethod
    def has_permission(self, user: UserAccount, path: str, permission: Permission) -> bool:
        """Return ``True`` when ``user`` holds ``permission`` on ``path``."""

    @abstractmethod
    def has_role(self, user: UserAccount, role: str) -> bool:
        """Return ``True`` when ``user`` is a member of ``role``."""

    @abstractmethod
    def is_inside_current_project(self, path: str, project: Project) -> bool:
        """Return ``True`` when ``path`` belongs to the resources of ``project``."""

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Move the resource at ``source`` to ``destination``."""

    @abstractmethod
    def undo_changes(self, path: str, recursive: bool = False) -> None:
        """Restore the online state of ``path`` (and its children if ``recursive``)."""

    @abstractmethod
    def read_property(self, path: str, name: str, search: bool = False) -> str | None:
        """Return property ``name`` of ``path``, walking up parents when ``search``."""

    @abstractmethod
    def read_version(self, path: str, version: int) -> ResourceVersion:
        """Return the historical ``version`` of ``path``."""

    @abstractmethod
    def synchronize(self, folder: str, destination: str, report: "Report") -> None:
        """Mirror ``folder`` into the file system ``destination``."""

    @abstractmethod
    def export_static(self, report: "Report") -> None:
        """Write the static export of exportable resources."""


__all__ = ["RepositoryAdapter"]


# The End
