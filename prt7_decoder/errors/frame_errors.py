"""
Frame error classifications for PRT-7 line parsing.

These exceptions describe a single line that could not be turned into a
frame. None of them is fatal to a decoding session.
"""

from typing import Optional, Dict, Any


class FrameError(Exception):
    """Base class for frame problems that are skipped by the session."""

    def __init__(self, message: str, raw_line: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.raw_line = raw_line
        self.context = context or {}
        self.recoverable = True


class MalformedFrameError(FrameError):
    """Line does not follow the "<CMD>,<DATA>" grammar."""


class UnknownCommandError(FrameError):
    """Command character is neither LOAD nor MAP."""

    def __init__(self, message: str, command: Optional[str] = None,
                 data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.command = command
        self.data = data


class InvalidRotationError(FrameError):
    """MAP data is not a signed decimal integer (strict rotation mode only)."""

    def __init__(self, message: str, data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data = data
