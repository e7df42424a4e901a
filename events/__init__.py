"""
Event system: base classes, handler registries and the warp events.
"""

from events.handlers import EventPriority, HandlerList, RegisteredHandler
from events.base import Cancellable, Event, event_handler, register_events, unregister_events
from events.player import Player, PlayerCommandPreprocessEvent, PlayerEvent
from events.warp import WarpCreateEvent, WarpDeleteEvent, WarpEvent

__all__ = [
    'EventPriority',
    'HandlerList',
    'RegisteredHandler',
    'Cancellable',
    'Event',
    'event_handler',
    'register_events',
    'unregister_events',
    'Player',
    'PlayerEvent',
    'PlayerCommandPreprocessEvent',
    'WarpEvent',
    'WarpCreateEvent',
    'WarpDeleteEvent',
]
