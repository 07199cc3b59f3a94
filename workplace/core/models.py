# -*- coding: utf-8 -*-
"""
models

Plain data objects exchanged between the workplace and the repository adapter.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .settings.choices import IntChoices, StrChoices


class ResourceState(IntChoices):
    """Modification state of a resource inside the current project."""

    UNCHANGED = (0, "unchanged")
    CHANGED = (1, "changed")
    NEW = (2, "new")
    DELETED = (3, "deleted")


class Permission(StrChoices):
    """Permissions the workplace asks the repository about."""

    READ = ("read", "Read")
    WRITE = ("write", "Write")
    CONTROL = ("control", "Control")


def is_folder_path(path: str) -> bool:
    """Return ``True`` when ``path`` denotes a folder."""

    return path.endswith("/")


def parent_folder(path: str) -> str | None:
    """Return the parent folder of ``path`` with a trailing slash."""

    trimmed = path.rstrip("/")
    if not trimmed:
        return None
    index = trimmed.rfind("/")
    return trimmed[: index + 1] or "/"


def resource_name(path: str) -> str:
    """Return the last path segment of ``path`` without a trailing slash."""

    trimmed = path.rstrip("/")
    return trimmed[trimmed.rfind("/") + 1 :]


@dataclass
class Resource:
    """Addressable file or folder stored in the repository."""

    root_path: str
    type_name: str = "plain"
    state: ResourceState = ResourceState.UNCHANGED
    locked_by: str | None = None
    project_id: int | None = None
    properties: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def is_folder(self) -> bool:
        """Return ``True`` when the resource is a folder."""
        return is_folder_path(self.root_path)

    @property
    def name(self) -> str:
        """Return the resource name without its parent path."""
        return resource_name(self.root_path)

    @property
    def parent(self) -> str | None:
        """Return the parent folder path or ``None`` for the root folder."""
        return parent_folder(self.root_path)


@dataclass(frozen=True)
class ResourceVersion:
    """Historical version of a resource kept by the repository."""

    root_path: str
    version: int
    content: bytes = b""
    type_name: str = "plain"


@dataclass
class UserAccount:
    """Repository user with fixed profile columns and additional info."""

    ADDITIONAL_INFO_TOWN = "USER_TOWN"
    ADDITIONAL_INFO_COUNTRY = "USER_COUNTRY"
    ADDITIONAL_INFO_INSTITUTION = "USER_INSTITUTION"
    ADDITIONAL_INFO_ZIPCODE = "USER_ZIPCODE"

    name: str
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    address: str = ""
    additional_info: Dict[str, Any] = field(default_factory=dict)

    @property
    def fullname(self) -> str:
        """Return first and last name joined, falling back to the login name."""
        parts = [part for part in (self.firstname, self.lastname) if part]
        return " ".join(parts) if parts else self.name

    @property
    def city(self) -> Any:
        return self.additional_info.get(self.ADDITIONAL_INFO_TOWN)

    @property
    def country(self) -> Any:
        return self.additional_info.get(self.ADDITIONAL_INFO_COUNTRY)

    @property
    def institution(self) -> Any:
        return self.additional_info.get(self.ADDITIONAL_INFO_INSTITUTION)

    @property
    def zipcode(self) -> Any:
        return self.additional_info.get(self.ADDITIONAL_INFO_ZIPCODE)


@dataclass(frozen=True)
class Project:
    """Offline or online project a request works in."""

    id: int
    name: str
    online: bool = False


ONLINE_PROJECT = Project(id=0, name="Online", online=True)


@dataclass
class RequestContext:
    """Per-request state handed to dialogs, handlers, and resolvers."""

    user: UserAccount
    project: Project
    locale: str = "en"
    uri: str = "/"
    encoding: str = "UTF-8"
    params: Mapping[str, str] = field(default_factory=dict)

    def param(self, name: str, default: str | None = None) -> str | None:
        """Return the request parameter ``name`` or ``default``."""
        value = self.params.get(name)
        if value is None or value == "":
            return default
        return value


__all__ = [
    "ResourceState",
    "Permission",
    "Resource",
    "ResourceVersion",
    "UserAccount",
    "Project",
    "ONLINE_PROJECT",
    "RequestContext",
    "is_folder_path",
    "parent_folder",
    "resource_name",
]


# The End
