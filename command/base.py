"""
Data structures for the command system.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WarpAction(str, Enum):
    CREATE = "create"
    DELETE = "delete"


@dataclass(frozen=True)
class ParsedCommand:
    """Command line split into its parts. Derived on demand, never stored."""
    command: str
    warp_name: Optional[str] = None  # None when the line has no arguments
