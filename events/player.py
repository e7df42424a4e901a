"""
Player events delivered by the host server.
"""

import threading
from typing import Protocol, runtime_checkable

from events.base import Cancellable, Event
from events.handlers import HandlerList


@runtime_checkable
class Player(Protocol):
    """Player identity as provided by the host. Also acts as permission oracle."""

    @property
    def name(self) -> str:
        ...

    def has_permission(self, permission: str) -> bool:
        ...


class PlayerEvent(Event):
    """Event involving a player. The player object is borrowed from the host."""

    def __init__(self, player: Player):
        self._player = player

    @property
    def player(self) -> Player:
        return self._player


class PlayerCommandPreprocessEvent(PlayerEvent, Cancellable):
    """
    Raw command line sent by a player, before the host executes it.

    The host honours the cancellation flag once dispatch returns: a cancelled
    notification blocks the command.
    """

    _handler_list = HandlerList()

    def __init__(self, player: Player, message: str):
        super().__init__(player)
        self._message = message
        self._cancelled = False
        self._lock = threading.Lock()

    @property
    def message(self) -> str:
        """Command line as typed, including the leading slash."""
        return self._message

    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    def set_cancelled(self, cancel: bool) -> None:
        with self._lock:
            self._cancelled = bool(cancel)

    def __repr__(self) -> str:
        return (
            f"PlayerCommandPreprocessEvent(player={self.player.name!r}, "
            f"message={self._message!r}, cancelled={self._cancelled})"
        )
