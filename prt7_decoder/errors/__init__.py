"""
Error classification for the PRT-7 decoder.

Frame errors are recoverable: the offending line is skipped and the session
continues. Link failures end the session or reject the operation outright.
"""

from .frame_errors import (
    FrameError,
    MalformedFrameError,
    UnknownCommandError,
    InvalidRotationError,
)
from .link_failures import (
    LinkFailureError,
    LineSourceError,
    SerialLinkError,
    SessionClosedError,
    ConfigurationError,
)

__all__ = [
    # Frame Errors
    "FrameError",
    "MalformedFrameError",
    "UnknownCommandError",
    "InvalidRotationError",
    # Link Failures
    "LinkFailureError",
    "LineSourceError",
    "SerialLinkError",
    "SessionClosedError",
    "ConfigurationError",
]
