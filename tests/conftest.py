# -*- coding: utf-8 -*-
"""conftest

Shared fixtures for the workplace test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterator

import pytest

from workplace.adapters import MemoryRepository
from workplace.conf import WorkplaceSettings
from workplace.core.context import WorkplaceContext
from workplace.core.messages import MessageCatalog
from workplace.core.models import (
    Project,
    RequestContext,
    Resource,
    ResourceState,
    ResourceVersion,
    UserAccount,
)
from workplace.core.settings import system_config


SAMPLE_CONFIG: Dict[str, Any] = {
    "contextmenus": [
        {
            "type_id": 1,
            "type_name": "plain",
            "entries": [
                {"key": "properties", "uri": "views/properties.jsp", "rules": "aaaaaaaaaaaaaa", "order": 30},
                {"key": "lock", "uri": "commons/lock.jsp", "rules": "dddaaaaiiiiiii", "order": 10, "legacy": True},
                {"kind": "separator", "order": 15},
                {
                    "key": "rename",
                    "uri": "views/rename.jsp?mode=1",
                    "rules": "diaaaaiiiddddd",
                    "order": 20,
                    "legacy": True,
                },
            ],
        },
        {
            "type_id": 0,
            "type_name": "folder",
            "entries": [
                {"key": "synchronize", "uri": "/system/sync.jsp", "rules": "aaaaaaaaaaaaaa", "order": 1},
            ],
        },
    ],
    "dialoghandlers": [
        {"key": "rename", "handler": "static", "options": {"uri": "/system/workplace/commons/rename.jsp"}},
        {
            "key": "edit",
            "handler": "resourcetype",
            "options": {
                "default": "/system/workplace/editors/editor.jsp",
                "types": {"folder": "/system/workplace/views/folder.jsp"},
            },
        },
    ],
    "userinfo": [
        {
            "title": "Contact",
            "entries": [
                {"key": "phone", "type_name": "string", "optional": True},
                {"key": "newsletter", "type_name": "bool", "widget_name": "checkbox"},
            ],
        }
    ],
    "accountinfos": [
        {"field": "firstname"},
        {"field": "addinfo", "addinfo": "USER_PHONE", "editable": "false"},
    ],
    "uploadfolders": {"image": "upload.folder.images"},
}

OFFLINE_PROJECT = Project(id=1, name="Offline")


class WorkplaceState:
    """Reset mutable singletons shared between tests."""

    def __init__(self) -> None:
        """Capture references to the shared runtime configuration."""

        self._system_config = system_config

    def reset(self) -> None:
        """Restore the system configuration cache to defaults."""

        self._system_config._cache.clear()  # type: ignore[attr-defined]


workplace_state = WorkplaceState()


@pytest.fixture(autouse=True)
def reset_workplace_state() -> Iterator[None]:
    workplace_state.reset()
    yield
    workplace_state.reset()


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog(
        "en",
        {
            "lock": "Lock",
            "rename": "Rename \"it\"",
            "properties": "Properties",
            "greeting": "Hello {0}, you have {1} messages",
        },
    )


@pytest.fixture
def repository() -> MemoryRepository:
    return MemoryRepository(
        [
            Resource("/sites/default/", type_name="folder"),
            Resource("/sites/default/index.html", properties={"title": "Home", "export": "true"}),
            Resource("/sites/default/news/", type_name="folder", properties={"upload.folder.image": "/sites/default/images/"}),
            Resource("/sites/default/news/a.html", state=ResourceState.CHANGED, content=b"news"),
            Resource("/sites/default/images/", type_name="folder"),
            Resource("/sites/default/about.html"),
            Resource("/sites/other/", type_name="folder"),
            Resource("/sites/other/page.html"),
        ],
        users=[
            UserAccount("admin", "Ada", "Admin", "admin@example.org"),
            UserAccount(
                "editor",
                "Eddie",
                "Editor",
                "editor@example.org",
                "Main Street 1",
                {"USER_TOWN": "Berlin", "USER_ZIPCODE": "10115", "USER_PHONE": "555-1234"},
            ),
            UserAccount("guest"),
        ],
        write_grants={"editor": ["/sites/default/"]},
        roles={"admin": ["administrator", "export"]},
        project_resources={1: ["/sites/default/"]},
        versions=[ResourceVersion("/sites/default/index.html", 2, b"<html>v2</html>")],
    )


@pytest.fixture
def settings(tmp_path) -> WorkplaceSettings:
    return WorkplaceSettings(
        sync_enabled=True,
        sync_destination=str(tmp_path / "sync"),
        sync_source_folders=["/sites/default/news/", "/sites/default/"],
    )


@pytest.fixture
def workplace(settings, repository, sample_config) -> Iterator[WorkplaceContext]:
    context = WorkplaceContext(settings, repository=repository, configuration=sample_config)
    context.initialize()
    yield context
    context.shutdown()


@pytest.fixture
def editor_context(workplace, repository) -> RequestContext:
    return workplace.request_context(repository.read_user("editor"), project=OFFLINE_PROJECT)


@pytest.fixture
def guest_context(workplace, repository) -> RequestContext:
    return workplace.request_context(repository.read_user("guest"), project=OFFLINE_PROJECT)


__all__ = ["workplace_state", "SAMPLE_CONFIG", "OFFLINE_PROJECT"]


# The End
