"""
Line sources feeding the decoder and output of the assembled message.
"""
from .output import MessagePrinter
from .sources import (
    FileLineSource,
    IterableLineSource,
    LineSource,
    SerialLineSource,
    open_line_source,
)

__all__ = [
    "FileLineSource",
    "IterableLineSource",
    "LineSource",
    "MessagePrinter",
    "SerialLineSource",
    "open_line_source",
]
