# -*- coding: utf-8 -*-
"""
templates.rendering

Render dialog outcomes with the workplace templates.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..dialogs.base import DialogOutcome

TEMPLATES_DIR = Path(__file__).resolve().parent


class DialogTemplateRenderer:
    """Provide cached access to the workplace templates."""

    _templates: Jinja2Templates | None = None

    @classmethod
    def get_templates(cls) -> Jinja2Templates:
        """Return a cached ``Jinja2Templates`` instance."""

        if cls._templates is None:
            cls._templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
        return cls._templates

    @classmethod
    def render(cls, request: Request, outcome: DialogOutcome) -> HTMLResponse:
        """Render ``outcome`` with its view template and status code."""

        return cls.get_templates().TemplateResponse(
            request,
            outcome.view,
            dict(outcome.context),
            status_code=outcome.status_code,
        )


# The End
