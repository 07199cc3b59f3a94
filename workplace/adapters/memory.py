# -*- coding: utf-8 -*-
"""
memory

In-memory repository adapter used by the example application and tests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from threading import RLock
from typing import Dict, Iterable, List, Mapping, TYPE_CHECKING

from ..core.exceptions import RepositoryError, ResourceNotFound
from ..core.models import (
    Permission,
    Project,
    Resource,
    ResourceState,
    ResourceVersion,
    UserAccount,
    parent_folder,
)
from .base import RepositoryAdapter

if TYPE_CHECKING:  # pragma: no cover
    from ..core.reports import Report


def _covers(folder: str, path: str) -> bool:
    """Return ``True`` when ``path`` is ``folder`` itself or lies below it."""

    base = folder.rstrip("/")
    return path == base or path.startswith(base + "/")


class MemoryRepository(RepositoryAdapter):
    """Keep resources, users, grants, and versions in dictionaries."""

    name = "memory"

    ADMIN_ROLE = "administrator"

    def __init__(
        self,
        resources: Iterable[Resource] = (),
        *,
        users: Iterable[UserAccount] = (),
        write_grants: Mapping[str, Iterable[str]] | None = None,
        roles: Mapping[str, Iterable[str]] | None = None,
        project_resources: Mapping[int, Iterable[str]] | None = None,
        versions: Iterable[ResourceVersion] = (),
    ) -> None:
        """Populate the repository and remember the online snapshot."""

        self._lock = RLock()
        self._resources: Dict[str, Resource] = {"/": Resource(root_path="/", type_name="folder")}
        for resource in resources:
            self.add_resource(resource)
        self._online: Dict[str, Resource] = copy.deepcopy(self._resources)
        self._users: Dict[str, UserAccount] = {user.name: user for user in users}
        self._grants: Dict[str, List[str]] = {
            user: list(paths) for user, paths in (write_grants or {}).items()
        }
        self._roles: Dict[str, List[str]] = {
            user: list(items) for user, items in (roles or {}).items()
        }
        self._project_resources: Dict[int, List[str]] = {
            project: list(paths) for project, paths in (project_resources or {}).items()
        }
        self._versions: Dict[tuple[str, int], ResourceVersion] = {
            (version.root_path, version.version): version for version in versions
        }
        self.exported: List[str] = []
        self.logger = logging.getLogger(__name__)

    def add_resource(self, resource: Resource) -> None:
        """Store ``resource`` creating missing parent folders."""

        with self._lock:
            parent = parent_folder(resource.root_path)
            while parent is not None and parent not in self._resources:
                self._resources[parent] = Resource(root_path=parent, type_name="folder")
                parent = parent_folder(parent)
            self._resources[resource.root_path] = resource

    def read_resource(self, path: str) -> Resource:
        """Return the resource stored at ``path``."""

        with self._lock:
            resource = self._resources.get(path)
        if resource is None:
            raise ResourceNotFound(f"Resource {path} not found")
        return resource

    def exists(self, path: str) -> bool:
        """Return ``True`` when ``path`` is stored."""

        with self._lock:
            return path in self._resources

    def read_user(self, name: str) -> UserAccount:
        """Return the user named ``name``."""

        user = self._users.get(name)
        if user is None:
            raise ResourceNotFound(f"User {name} not found")
        return user

    def has_permission(self, user: UserAccount, path: str, permission: Permission) -> bool:
        """Grant read to everyone and write below the user's granted folders."""

        if permission == Permission.READ:
            return True
        if self.has_role(user, self.ADMIN_ROLE):
            return True
        return any(_covers(prefix, path) for prefix in self._grants.get(user.name, ()))

    def has_role(self, user: UserAccount, role: str) -> bool:
        """Return ``True`` when ``role`` is assigned to ``user``."""

        return role in self._roles.get(user.name, ())

    def is_inside_current_project(self, path: str, project: Project) -> bool:
        """Return ``True`` when ``path`` lies below a folder of ``project``."""

        if project.online:
            return False
        return any(_covers(prefix, path) for prefix in self._project_resources.get(project.id, ()))

    def rename(self, source: str, destination: str) -> None:
        """Move ``source`` and its children to ``destination``."""

        with self._lock:
            if source not in self._resources:
                raise ResourceNotFound(f"Resource {source} not found")
            if destination in self._resources:
                raise RepositoryError(f"Resource {destination} already exists")
            moved = [path for path in self._resources if path == source or (
                source.endswith("/") and path.startswith(source)
            )]
            for path in moved:
                resource = self._resources.pop(path)
                resource.root_path = destination + path[len(source) :]
                if resource.state == ResourceState.UNCHANGED:
                    resource.state = ResourceState.CHANGED
                self._resources[resource.root_path] = resource
        self.logger.debug("Renamed %s to %s", source, destination)

    def undo_changes(self, path: str, recursive: bool = False) -> None:
        """Restore the online snapshot of ``path``."""

        with self._lock:
            if path not in self._resources:
                raise ResourceNotFound(f"Resource {path} not found")
            if path not in self._online:
                raise RepositoryError(f"Resource {path} has no online version")
            targets = [path]
            if recursive and path.endswith("/"):
                targets.extend(
                    item for item in self._online if item != path and item.startswith(path)
                )
            for target in targets:
                self._resources[target] = copy.deepcopy(self._online[target])

    def read_property(self, path: str, name: str, search: bool = False) -> str | None:
        """Return ``name`` from ``path`` or, with ``search``, from its ancestors."""

        current: str | None = path
        while current is not None:
            with self._lock:
                resource = self._resources.get(current)
            if resource is None:
                if current == path:
                    raise ResourceNotFound(f"Resource {path} not found")
            elif name in resource.properties:
                return resource.properties[name]
            if not search:
                return None
            current = parent_folder(current)
        return None

    def read_version(self, path: str, version: int) -> ResourceVersion:
        """Return the stored ``version`` of ``path``."""

        entry = self._versions.get((path, version))
        if entry is None:
            raise ResourceNotFound(f"Version {version} of {path} not found")
        return entry

    def synchronize(self, folder: str, destination: str, report: "Report") -> None:
        """Write the files below ``folder`` into ``destination``."""

        target_root = Path(destination)
        with self._lock:
            items = sorted(
                (path, resource)
                for path, resource in self._resources.items()
                if path.startswith(folder)
            )
        for path, resource in items:
            target = target_root / path.lstrip("/")
            try:
                if resource.is_folder:
                    target.mkdir(parents=True, exist_ok=True)
                else:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_bytes(resource.content)
            except OSError as exc:
                raise RepositoryError(f"Cannot write {target}: {exc}") from exc
            report.println(f"{path} -> {target}")

    def export_static(self, report: "Report") -> None:
        """Record every resource flagged with the ``export`` property."""

        with self._lock:
            candidates = sorted(
                path
                for path, resource in self._resources.items()
                if resource.properties.get("export") == "true"
            )
        for path in candidates:
            self.exported.append(path)
            report.println(f"Exported {path}")


__all__ = ["MemoryRepository"]


# The End
