"""
Event bus through which systems report what happened during a tick.

Event types are Enum members shared by publisher and subscriber.

Usage:
    world.event_bus.subscribe(MovementEvent.PATH_COMPLETED, on_path_completed)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """
    Attributes:
        type: The event type (Enum member)
        data: Event-specific payload
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Synchronous publish/subscribe.

    Handlers run in subscription order. A handler that raises is logged
    and does not stop the others, nor the tick that published the event.
    """

    def __init__(self):
        self._handlers: dict[Enum, list[EventHandler]] = {}

    def subscribe(self, event_type: Enum, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        event = Event(type=event_type, data=data)

        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event_type)

        return event
