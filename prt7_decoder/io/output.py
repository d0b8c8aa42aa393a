"""Printing of the assembled message."""

import json
import sys
from typing import Any, TextIO

from ..session.models import SessionResult

BANNER = " --- "
TITLE = " HIDDEN MESSAGE ASSEMBLED "


class MessagePrinter:
    """Writes a finished session's message as a banner block or as JSON."""

    def __init__(self, format: str = "pretty", stream: TextIO = None):
        self.format = format
        self.stream = stream or sys.stdout

    def print_result(self, result: SessionResult) -> None:
        print(self.format_result(result), file=self.stream, flush=True)

    def format_result(self, result: SessionResult) -> str:
        if self.format == "json":
            return json.dumps(self._to_dict(result))

        return "\n".join([BANNER, TITLE, result.message, BANNER])

    def _to_dict(self, result: SessionResult) -> dict[str, Any]:
        return {
            "session_id": result.session_id,
            "message": result.message,
            "termination": result.termination.value,
            "source_error": result.source_error,
            "stats": result.stats.as_dict(),
        }
