"""
Command system for warp command detection.
Provides the command line parser, configuration and the command listener.
"""

from command.base import ParsedCommand, WarpAction
from command.config import WarpCommandConfig
from command.router import CommandParser
from command.listener import CommandListener

__all__ = ['ParsedCommand', 'WarpAction', 'WarpCommandConfig', 'CommandParser', 'CommandListener']
