# -*- coding: utf-8 -*-
"""
events

Synchronous workplace event bus.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict, List, Mapping

from .settings.choices import StrChoices


logger = logging.getLogger(__name__)


class WorkplaceEvent(StrChoices):
    """Events fired by workplace dialogs."""

    REINIT_WORKPLACE = ("reinit_workplace", "Re-initialize workplace")


EventListener = Callable[[WorkplaceEvent, Mapping[str, Any]], None]


class EventBus:
    """Deliver events to listeners in registration order."""

    def __init__(self) -> None:
        self._listeners: Dict[WorkplaceEvent, List[EventListener]] = {}
        self._lock = RLock()

    def subscribe(self, event: WorkplaceEvent, listener: EventListener) -> None:
        """Call ``listener`` whenever ``event`` fires."""

        with self._lock:
            self._listeners.setdefault(event, []).append(listener)

    def unsubscribe(self, event: WorkplaceEvent, listener: EventListener) -> None:
        with self._lock:
            listeners = self._listeners.get(event, [])
            if listener in listeners:
                listeners.remove(listener)

    def fire(self, event: WorkplaceEvent, payload: Mapping[str, Any] | None = None) -> int:
        """Notify the listeners of ``event`` and return how many ran."""

        with self._lock:
            listeners = list(self._listeners.get(event, ()))
        data = dict(payload or {})
        logger.info("Firing %s to %d listener(s)", event.value, len(listeners))
        for listener in listeners:
            listener(event, data)
        return len(listeners)

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()


__all__ = ["WorkplaceEvent", "EventListener", "EventBus"]


# The End
