# -*- coding: utf-8 -*-
"""
undo_changes

Restore the online state of a modified resource.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..core.exceptions import ValidationError
from ..core.models import RequestContext, ResourceState
from .base import BaseDialog, DialogOutcome


_TRUE_VALUES = {"1", "true", "yes", "on"}


class UndoChangesDialog(BaseDialog):
    """Discard project changes of a resource, optionally below a folder."""

    key = "undochanges"
    title_key = "dialog.undochanges.title"

    def form_fields(self, params: Mapping[str, str], context: RequestContext) -> Dict[str, Any]:
        resource = params.get("resource", "")
        return {"resource": resource, "show_recursive": resource.endswith("/")}

    def perform_action(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        path = self.required_param(params, "resource", context)
        resource = self.read_writable(path, context)
        recursive = resource.is_folder and (params.get("recursive") or "").lower() in _TRUE_VALUES
        if not recursive and resource.state == ResourceState.UNCHANGED:
            raise ValidationError(self.catalog(context).key("error.undochanges.unchanged", path))

        self.repository.undo_changes(path, recursive)
        self.logger.info(
            "User %s undid changes of %s%s",
            context.user.name,
            path,
            " recursively" if recursive else "",
        )
        return self.success(context, "dialog.undochanges.done", path)


__all__ = ["UndoChangesDialog"]


# The End
