# -*- coding: utf-8 -*-
"""
application.factory

Factories for assembling FastAPI applications serving the workplace.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from ..adapters import RepositoryAdapter
from ..api import ProjectResolver, UserResolver, WorkplaceRouter
from ..conf import WorkplaceSettings, current_settings
from ..core.context import WorkplaceContext

LifecycleHook = Callable[[], Awaitable[None] | None]


class ApplicationFactory:
    """Create FastAPI applications with the workplace router mounted."""

    def __init__(
        self,
        *,
        settings: WorkplaceSettings | None = None,
        repository: RepositoryAdapter | str | None = None,
        configuration: Any | None = None,
        user_resolver: UserResolver | None = None,
        project_resolver: ProjectResolver | None = None,
    ) -> None:
        """Persist configuration and collaborators for application builds."""

        self._settings = settings
        self._repository = repository
        self._configuration = configuration
        self._user_resolver = user_resolver
        self._project_resolver = project_resolver
        self._startup_hooks: list[LifecycleHook] = []
        self._shutdown_hooks: list[LifecycleHook] = []

    def register_startup_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application startup."""

        self._startup_hooks.append(hook)

    def register_shutdown_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application shutdown."""

        self._shutdown_hooks.append(hook)

    def build(self, *, settings: WorkplaceSettings | None = None) -> FastAPI:
        """Return a FastAPI instance with an initialized workplace."""

        if settings is not None:
            self._settings = settings
        active = self._settings or current_settings()
        workplace = WorkplaceContext(
            active,
            repository=self._repository,
            configuration=self._configuration,
        ).initialize()

        app = FastAPI(title="Workplace", lifespan=self._build_lifespan(workplace))
        app.state.workplace = workplace
        router = WorkplaceRouter(
            workplace,
            user_resolver=self._user_resolver,
            project_resolver=self._project_resolver,
        )
        prefix = "" if active.workplace_path == "/" else active.workplace_path
        app.include_router(router.router, prefix=prefix)
        return app

    def _build_lifespan(self, workplace: WorkplaceContext):
        """Return a lifespan running the hooks and shutting ``workplace`` down."""

        startup = list(self._startup_hooks)
        shutdown = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            for hook in startup:
                await _run_hook(hook)
            try:
                yield
            finally:
                for hook in shutdown:
                    await _run_hook(hook)
                workplace.shutdown()

        return lifespan


async def _run_hook(hook: LifecycleHook) -> None:
    result = hook()
    if inspect.isawaitable(result):
        await result


__all__ = ["ApplicationFactory"]


# The End
