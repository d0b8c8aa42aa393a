"""
Link and session failure classifications.

These exceptions are not frame-level problems: they come from the line
source, the configuration, or misuse of a finished session.
"""

from typing import Optional, Dict, Any


class LinkFailureError(Exception):
    """Base class for failures that a session cannot skip over."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class LineSourceError(LinkFailureError):
    """The line source could not deliver a line."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class SerialLinkError(LineSourceError):
    """Serial device could not be opened or read."""

    def __init__(self, message: str, port: Optional[str] = None, **kwargs):
        super().__init__(message, source=port, **kwargs)
        self.port = port


class SessionClosedError(LinkFailureError):
    """A line was fed to a session that already finished."""

    def __init__(self, message: str, current_state: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state


class ConfigurationError(LinkFailureError):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
