# -*- coding: utf-8 -*-
"""
reinit

Re-initialize the workplace caches.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Mapping

from ..core.events import WorkplaceEvent
from ..core.models import RequestContext
from .base import BaseDialog, DialogOutcome


class ReinitDialog(BaseDialog):
    key = "reinit"
    title_key = "dialog.reinit.title"

    def perform_action(self, params: Mapping[str, str], context: RequestContext) -> DialogOutcome:
        notified = self.workplace.events.fire(
            WorkplaceEvent.REINIT_WORKPLACE, {"user": context.user.name}
        )
        self.logger.info("User %s re-initialized the workplace", context.user.name)
        return self.success(context, "dialog.reinit.done", notified)


__all__ = ["ReinitDialog"]


# The End
