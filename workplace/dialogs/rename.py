# -*- coding: utf-8 -*-
"""
rename

Rename a resource inside its parent folder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..core.exceptions import ValidationError
from ..core.models import RequestContext, resource_name
from .base import BaseDialog, DialogOutcome


class RenameDialog(BaseDialog):
    """Give a resource a new name without moving it to another folder."""

    key = "rename"
    title_key = "dialog.rename.title"

    def form_fields(self, params: Mapping[str, str], context: RequestContext) -> Dict[str, Any]:
        resource = params.get("resource", "")
        return {"resource": resource, "target": params.get("target") or resource_name(resource)}

    def destination(self, source: str, target: str, *, is_folder: bool) -> str:
        """Return the path ``source`` gets when renamed to ``target``."""

        trimmed = source.rstrip("/")
        parent = trimmed[: trimmed.rfind("/") + 1] or "/"
        return f"{parent}{target}/" if is_folder else f"{parent}{target}"

    def perform_action(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        catalog = self.catalog(context)
        source = self.required_param(params, "resource", context)
        target = (params.get("target") or "").strip()
        if not target:
            raise ValidationError(catalog.key("error.rename.empty"))
        if "/" in target:
            raise ValidationError(catalog.key("error.rename.slash", target))
        if not target.strip("."):
            raise ValidationError(catalog.key("error.rename.dots", target))

        resource = self.read_writable(source, context)
        if resource.parent is None:
            raise ValidationError(catalog.key("error.rename.root"))
        destination = self.destination(source, target, is_folder=resource.is_folder)
        if destination == resource.root_path:
            return self.success(context, "dialog.rename.unchanged", source)
        if self.repository.exists(destination):
            raise ValidationError(catalog.key("error.rename.exists", destination))

        self.repository.rename(resource.root_path, destination)
        self.logger.info("User %s renamed %s to %s", context.user.name, source, destination)
        return self.success(context, "dialog.rename.done", source, destination)


__all__ = ["RenameDialog"]


# The End
