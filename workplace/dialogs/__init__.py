# -*- coding: utf-8 -*-
"""
__init__

Workplace dialogs and their registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Dict, TYPE_CHECKING

from .base import BaseDialog, DialogAction, DialogOutcome, ReportDialog
from .reinit import ReinitDialog
from .rename import RenameDialog
from .static_export import StaticExportDialog
from .synchronize import SynchronizeDialog, remove_redundancies
from .undo_changes import UndoChangesDialog
from .version import VersionFetch

if TYPE_CHECKING:  # pragma: no cover
    from ..core.context import WorkplaceContext


DIALOG_CLASSES = (
    RenameDialog,
    UndoChangesDialog,
    SynchronizeDialog,
    StaticExportDialog,
    ReinitDialog,
)


def build_dialogs(workplace: "WorkplaceContext") -> Dict[str, BaseDialog]:
    """Return one instance of every dialog keyed by its URL name."""

    return {dialog_cls.key: dialog_cls(workplace) for dialog_cls in DIALOG_CLASSES}


__all__ = [
    "BaseDialog",
    "DialogAction",
    "DialogOutcome",
    "ReportDialog",
    "RenameDialog",
    "UndoChangesDialog",
    "SynchronizeDialog",
    "StaticExportDialog",
    "ReinitDialog",
    "VersionFetch",
    "remove_redundancies",
    "DIALOG_CLASSES",
    "build_dialogs",
]

# The End
