"""
Warp creation and deletion events.

Both events share the cancellation state of the command notification they
were raised from: cancelling a warp event cancels the command itself.
"""

from typing import Optional

from events.base import Cancellable
from events.handlers import HandlerList
from events.player import PlayerCommandPreprocessEvent, PlayerEvent


class WarpEvent(PlayerEvent, Cancellable):
    """Base class for warp events. Subscribe to a concrete variant."""

    def __init__(self, command_event: PlayerCommandPreprocessEvent, warp_name: Optional[str]):
        """
        Args:
            command_event: Notification the warp command arrived in
            warp_name: Extracted warp name, None if the command had no argument
        """
        super().__init__(command_event.player)
        self._command_event = command_event
        self._warp_name = warp_name

    @property
    def warp_name(self) -> Optional[str]:
        return self._warp_name

    def get_warp_name(self) -> Optional[str]:
        return self._warp_name

    def is_cancelled(self) -> bool:
        return self._command_event.is_cancelled()

    def set_cancelled(self, cancel: bool) -> None:
        self._command_event.set_cancelled(cancel)

    def __repr__(self) -> str:
        return f"{self.event_name}(player={self.player.name!r}, warp_name={self._warp_name!r})"


class WarpCreateEvent(WarpEvent):
    """Raised when a player with permission runs a warp creation command."""

    _handler_list = HandlerList()


class WarpDeleteEvent(WarpEvent):
    """Raised when a player with permission runs a warp deletion command."""

    _handler_list = HandlerList()
