"""
Command line tokenizer.
"""

from typing import Optional

from command.base import ParsedCommand


class CommandParser:
    """Split a raw command line into its command token and warp name."""

    @staticmethod
    def extract_command(buffer: str) -> str:
        """
        Get the command token, including the leading slash.

        Example:
            "/setwarp home" -> "/setwarp"
            "/setwarp" -> "/setwarp"
        """
        space_index = buffer.find(" ")
        return buffer if space_index == -1 else buffer[:space_index]

    @staticmethod
    def extract_warp_name(buffer: str) -> Optional[str]:
        """
        Get the warp name from a command line.

        With a single argument the whole argument is returned. With two or
        more, the first and the last argument are dropped and everything in
        between is returned as-is.

        Returns:
            The warp name, or None if the line has no arguments

        Example:
            "/setwarp home" -> "home"
            "/setwarp PlayerX home" -> "PlayerX"
            "/setwarp a b c" -> "a b"
            "/setwarp " -> ""
            "/setwarp" -> None
        """
        space_index = buffer.find(" ")
        if space_index == -1:
            return None

        last_space_index = buffer.rfind(" ")
        if last_space_index == space_index:
            return buffer[space_index + 1:]

        return buffer[space_index + 1:last_space_index]

    @staticmethod
    def parse(buffer: str) -> ParsedCommand:
        """Parse a command line into command token and warp name."""
        return ParsedCommand(
            command=CommandParser.extract_command(buffer),
            warp_name=CommandParser.extract_warp_name(buffer)
        )
