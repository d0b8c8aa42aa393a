"""
Frame data models for the PRT-7 protocol.

Frames are immutable values: they are built by the parser, applied once by
the processor and then dropped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class FrameCommand(str, Enum):
    """Command characters recognised by the protocol."""
    LOAD = "L"
    MAP = "M"

    @classmethod
    def from_char(cls, char: str) -> Optional["FrameCommand"]:
        """Resolve a command character case-insensitively, None if unknown."""
        try:
            return cls(char.upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class LoadFrame:
    """A single symbol to decode: a letter or the space character."""
    symbol: str

    command = FrameCommand.LOAD


@dataclass(frozen=True)
class MapFrame:
    """A signed rotation offset for the wheel."""
    offset: int

    command = FrameCommand.MAP


Frame = Union[LoadFrame, MapFrame]
