# src/farmhand/core/events.py

from __future__ import annotations

import logging
from typing import Any

from .ports import EventHandler

logger = logging.getLogger(__name__)


class EventBus:
    """
    In-process EventSource.

    The network layer calls emit() for every decoded push message.
    A failing handler is logged and does not stop the remaining handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, event: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._handlers[event]

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(event, ()))

    def emit(self, event: str, *args: Any) -> int:
        """Call every handler registered for event. Returns the number of handlers called."""
        handlers = list(self._handlers.get(event, ()))
        for handler in handlers:
            try:
                handler(*args)
            except Exception:
                logger.exception("event handler failed event=%s", event)
        return len(handlers)
