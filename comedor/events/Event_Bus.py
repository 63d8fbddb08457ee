"""Simple Event Bus / Observer implementation for cafeteria events.

Event names:
  menu.published      -> payload {"week_start": str, "published_by": str | None}
  confirmation.saved  -> payload {"week_id": str, "branch_id": str, "confirmations": int}
  employees.imported  -> payload {"branch_id": str, "count": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MENU_PUBLISHED = "menu.published"
CONFIRMATION_SAVED = "confirmation.saved"
EMPLOYEES_IMPORTED = "employees.imported"


Handler = Callable[[str, Any], None]


class EventBus:
    """Synchronous publish/subscribe keyed by event name."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, event_name: str, handler: Handler) -> Callable[[], bool]:
        """Register `handler` once for `event_name`; returns a function that removes it."""
        handlers = self._handlers.setdefault(event_name, [])
        if handler not in handlers:
            handlers.append(handler)
        return lambda: self.unsubscribe(event_name, handler)

    def unsubscribe(self, event_name: str, handler: Handler) -> bool:
        handlers = self._handlers.get(event_name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, event_name: str, payload: Any = None) -> int:
        """Deliver to every handler and return how many accepted the event."""
        delivered = 0
        for handler in tuple(self._handlers.get(event_name, ())):
            try:
                handler(event_name, payload)
            except Exception:
                logger.exception("Error delivering %s to %r", event_name, handler)
            else:
                delivered += 1
        return delivered


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS',
    'MENU_PUBLISHED', 'CONFIRMATION_SAVED', 'EMPLOYEES_IMPORTED'
]
