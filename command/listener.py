"""
Listener turning Essentials warp commands into warp events.
"""

import logging
from typing import Optional

from command.base import WarpAction
from command.config import WarpCommandConfig
from command.router import CommandParser
from events import (
    EventPriority,
    PlayerCommandPreprocessEvent,
    WarpCreateEvent,
    WarpDeleteEvent,
    event_handler,
)

logger = logging.getLogger(__name__)

WARP_EVENTS = {
    WarpAction.CREATE: WarpCreateEvent,
    WarpAction.DELETE: WarpDeleteEvent,
}


class CommandListener:
    """
    Watches player commands for warp creation and deletion.

    When a player with the matching permission runs one of the configured
    commands, a WarpCreateEvent or WarpDeleteEvent is raised. Handlers of
    those events may cancel them, which cancels the original command.
    """

    def __init__(self, config: Optional[WarpCommandConfig] = None):
        self.config = config or WarpCommandConfig()

    @event_handler(priority=EventPriority.LOW, ignore_cancelled=True)
    def on_command(self, event: PlayerCommandPreprocessEvent) -> None:
        if event.is_cancelled():
            return

        player = event.player
        buffer = event.message
        command = CommandParser.extract_command(buffer)

        # creation wins if a command is configured for both actions
        for action in (WarpAction.CREATE, WarpAction.DELETE):
            # the permission is asked for before the command is matched
            if (not player.has_permission(self.config.permission_for(action))
                    or command not in self.config.commands_for(action)):
                continue

            warp_name = CommandParser.extract_warp_name(buffer)
            warp_event = WARP_EVENTS[action](event, warp_name)
            logger.debug(f"{player.name} ran {command}, raising {warp_event!r}")
            warp_event.call_event()
            return
