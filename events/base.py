"""
Base classes for events and listener registration.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, get_type_hints

from events.handlers import EventPriority, HandlerList

logger = logging.getLogger(__name__)


class Event:
    """
    Base class for all events.

    Every concrete event class declares its own ``_handler_list``; abstract
    bases do not, so observers always subscribe to a specific variant.
    """

    @property
    def event_name(self) -> str:
        return type(self).__name__

    @classmethod
    def get_handler_list(cls) -> HandlerList:
        """Handler list owned by this event class."""
        handler_list = cls.__dict__.get("_handler_list")
        if handler_list is None:
            raise TypeError(f"{cls.__name__} does not declare its own handler list")
        return handler_list

    @property
    def handlers(self) -> HandlerList:
        return type(self).get_handler_list()

    def call_event(self) -> bool:
        """
        Dispatch this event synchronously to every registered handler.

        Returns:
            False if the event ended up cancelled, True otherwise
        """
        for handler in self.handlers.get_handlers():
            if handler.ignore_cancelled and self._is_cancelled():
                continue
            handler.callback(self)
        return not self._is_cancelled()

    def _is_cancelled(self) -> bool:
        return isinstance(self, Cancellable) and self.is_cancelled()


class Cancellable(ABC):
    """Mixin for events whose outcome can be vetoed by a handler."""

    @abstractmethod
    def is_cancelled(self) -> bool:
        pass

    @abstractmethod
    def set_cancelled(self, cancel: bool) -> None:
        pass

    @property
    def cancelled(self) -> bool:
        return self.is_cancelled()

    @cancelled.setter
    def cancelled(self, cancel: bool) -> None:
        self.set_cancelled(cancel)


def event_handler(
    priority: EventPriority = EventPriority.NORMAL,
    ignore_cancelled: bool = False
) -> Callable[[Callable], Callable]:
    """Decorator marking a listener method as an event handler."""
    def mark(func):
        func._event_handler = (EventPriority(priority), ignore_cancelled)
        return func
    return mark


def _resolve_event_class(func: Callable) -> type[Event]:
    hints = get_type_hints(func)
    params = [p for p in inspect.signature(func).parameters if p != "self"]
    event_class = hints.get(params[0]) if params else None
    if not (inspect.isclass(event_class) and issubclass(event_class, Event)):
        raise TypeError(
            f"Handler {func.__qualname__} must annotate its event parameter with an Event subclass"
        )
    return event_class


def register_events(listener: Any) -> int:
    """
    Register every @event_handler method of a listener.

    The event class is taken from the annotation of the method's event
    parameter. The listener is recorded as owner of each handler.

    Returns:
        Number of handlers registered
    """
    count = 0
    for attr_name in dir(type(listener)):
        func = getattr(type(listener), attr_name)
        marker = getattr(func, "_event_handler", None)
        if marker is None:
            continue
        priority, ignore_cancelled = marker
        event_class = _resolve_event_class(func)
        event_class.get_handler_list().register(
            getattr(listener, attr_name),
            priority=priority,
            ignore_cancelled=ignore_cancelled,
            owner=listener
        )
        count += 1
    logger.info(f"Registered {count} event handler(s) for {type(listener).__name__}")
    return count


def unregister_events(listener: Any) -> int:
    """Remove every handler registered for a listener."""
    return HandlerList.unregister_all(listener)
