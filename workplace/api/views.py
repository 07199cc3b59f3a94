# -*- coding: utf-8 -*-
"""
views

HTTP endpoints of the workplace: menu script, dialogs, versions, and reports.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ..core.exceptions import HTTPError, PermissionDenied, ResourceNotFound
from ..core.models import ONLINE_PROJECT, Project, RequestContext, UserAccount
from ..dialogs import BaseDialog, VersionFetch, build_dialogs
from ..templates.rendering import DialogTemplateRenderer

if TYPE_CHECKING:  # pragma: no cover
    from ..core.context import WorkplaceContext


UserResolver = Callable[[Request], UserAccount]
ProjectResolver = Callable[[Request], Project]

USER_HEADER = "x-workplace-user"
PROJECT_HEADER = "x-workplace-project"
LOCALE_PARAM = "locale"


def raw_query_param(request: Request, name: str) -> str | None:
    """Return the still URL-encoded value of query parameter ``name``."""

    for pair in request.url.query.split("&"):
        key, _, value = pair.partition("=")
        if key == name:
            return value
    return None


class WorkplaceRouter:
    """Expose the workplace services through a FastAPI router."""

    def __init__(
        self,
        workplace: "WorkplaceContext",
        *,
        user_resolver: UserResolver | None = None,
        project_resolver: ProjectResolver | None = None,
        renderer: type[DialogTemplateRenderer] = DialogTemplateRenderer,
    ) -> None:
        """Register every route on a fresh ``APIRouter``."""

        self.workplace = workplace
        self.user_resolver = user_resolver or self.default_user
        self.project_resolver = project_resolver or self.default_project
        self.renderer = renderer
        self.dialogs: Dict[str, BaseDialog] = build_dialogs(workplace)
        self.versions = VersionFetch(workplace)
        self.logger = logging.getLogger(__name__)
        self.router = APIRouter()
        self.router.get("/explorer/contextmenu.js")(self.context_menu_script)
        self.router.get("/dialogs/select")(self.select_dialog)
        self.router.get("/dialogs/version")(self.fetch_version)
        self.router.api_route(
            "/dialogs/{name}", methods=["GET", "POST"], response_class=HTMLResponse
        )(self.dialog)
        self.router.get("/reports/{report_id}")(self.report)

    # --- identity ------------------------------------------------------------

    def default_user(self, request: Request) -> UserAccount:
        """Read the user name from the session or the user header."""

        key = self.workplace.settings.session_user_key
        session = request.scope.get("session") or {}
        name = session.get(key) or request.headers.get(USER_HEADER)
        if not name:
            raise PermissionDenied("No workplace user on this request")
        try:
            return self.workplace.repository.read_user(name)
        except ResourceNotFound as exc:
            raise PermissionDenied(f"Unknown workplace user {name!r}") from exc

    def default_project(self, request: Request) -> Project:
        """Read the offline project id from the project header."""

        token = request.headers.get(PROJECT_HEADER)
        if not token:
            return ONLINE_PROJECT
        try:
            project_id = int(token)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid project id {token!r}") from exc
        if project_id == ONLINE_PROJECT.id:
            return ONLINE_PROJECT
        return Project(id=project_id, name=f"Project {project_id}")

    def _request_context(self, request: Request, params: Dict[str, str]) -> RequestContext:
        try:
            user = self.user_resolver(request)
        except HTTPError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        if user is None:
            raise HTTPException(status_code=403, detail="No workplace user on this request")
        return self.workplace.request_context(
            user,
            project=self.project_resolver(request),
            locale=params.get(LOCALE_PARAM),
            uri=params.get("resource") or "/",
            params=params,
        )

    # --- routes --------------------------------------------------------------

    async def context_menu_script(self, locale: str | None = None) -> Response:
        """Return the context menu registration script for ``locale``."""

        catalog = self.workplace.catalog(locale)
        script = self.workplace.menus.generate_script(catalog)
        return Response(content=script, media_type="application/javascript")

    async def select_dialog(
        self,
        request: Request,
        handler: str,
        resource: str | None = None,
    ) -> Dict[str, Any]:
        """Return the dialog URI the handler ``handler`` picks for ``resource``."""

        context = self._request_context(request, dict(request.query_params))
        encoded = raw_query_param(request, "resource")
        uri = self.workplace.selector.resolve(handler, encoded, context)
        return {"handler": handler, "resource": context.uri, "uri": uri}

    async def fetch_version(self, request: Request, resource: str | None = None) -> Response:
        """Return the content of ``<path>:<version>``."""

        self._request_context(request, dict(request.query_params))
        try:
            version = self.versions.fetch(resource)
        except HTTPError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return Response(content=version.content, media_type="application/octet-stream")

    async def dialog(self, request: Request, name: str) -> HTMLResponse:
        """Run one step of dialog ``name``."""

        dialog = self.dialogs.get(name)
        if dialog is None:
            raise HTTPException(status_code=404, detail=f"Unknown dialog {name!r}")
        params: Dict[str, str] = dict(request.query_params)
        if request.method == "POST":
            form = await request.form()
            params.update({key: str(value) for key, value in form.items()})
        context = self._request_context(request, params)
        self.logger.debug("Dialog %s requested by %s", name, context.user.name)
        outcome = dialog.perform(params, context)
        return self.renderer.render(request, outcome)

    async def report(self, report_id: str, offset: int = 0) -> JSONResponse:
        """Return report lines written since ``offset``."""

        try:
            lines, finished = self.workplace.reports.poll(report_id, offset)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown report {report_id}") from exc
        error = getattr(self.workplace.reports.get(report_id), "error", None)
        return JSONResponse(
            {
                "report_id": report_id,
                "lines": [{"format": fmt, "text": text} for fmt, text in lines],
                "offset": offset + len(lines),
                "finished": finished,
                "error": None if error is None else str(error),
            }
        )


__all__ = ["WorkplaceRouter", "UserResolver", "ProjectResolver", "raw_query_param"]


# The End
