"""
Handler registries for events.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventPriority(IntEnum):
    """Order in which handlers run. Lower values run first."""
    LOWEST = 0
    LOW = 1
    NORMAL = 2
    HIGH = 3
    HIGHEST = 4
    MONITOR = 5  # observe the final outcome, do not modify


@dataclass(frozen=True)
class RegisteredHandler:
    """A callback registered on a HandlerList."""
    callback: Callable[[Any], None]
    priority: EventPriority = EventPriority.NORMAL
    ignore_cancelled: bool = False
    owner: Any = None


class HandlerList:
    """Ordered list of handlers for a single event class."""

    _instances: list["HandlerList"] = []

    def __init__(self):
        self._handlers: list[RegisteredHandler] = []
        HandlerList._instances.append(self)

    def register(
        self,
        callback: Callable[[Any], None],
        priority: EventPriority = EventPriority.NORMAL,
        ignore_cancelled: bool = False,
        owner: Any = None
    ) -> RegisteredHandler:
        """
        Register a callback.

        Args:
            callback: Called with the event instance
            priority: Position in the dispatch order
            ignore_cancelled: Skip the callback while the event is cancelled
            owner: Listener object used for bulk unregistration

        Returns:
            The RegisteredHandler entry
        """
        if not callable(callback):
            raise TypeError(f"Handler must be callable, got {type(callback).__name__}")
        handler = RegisteredHandler(
            callback=callback,
            priority=EventPriority(priority),
            ignore_cancelled=ignore_cancelled,
            owner=owner
        )
        self._handlers.append(handler)
        logger.debug(f"Registered handler {callback!r} at priority {handler.priority.name}")
        return handler

    def unregister(self, target: Any) -> int:
        """
        Remove handlers matching a callback, a RegisteredHandler or an owner.

        Returns:
            Number of handlers removed
        """
        if target is None:
            return 0
        before = len(self._handlers)
        self._handlers = [
            h for h in self._handlers
            if h is not target and h.callback != target and h.owner is not target
        ]
        return before - len(self._handlers)

    @classmethod
    def unregister_all(cls, owner: Any) -> int:
        """Remove every handler owned by ``owner`` from all handler lists."""
        return sum(handler_list.unregister(owner) for handler_list in cls._instances)

    def get_handlers(self) -> list[RegisteredHandler]:
        """Get handlers in dispatch order (priority, then registration order)."""
        # sorted() is stable, so registration order is kept within a priority
        return sorted(self._handlers, key=lambda h: h.priority)

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)
