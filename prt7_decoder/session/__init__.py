"""
Decoding session lifecycle.

A session owns one rotor wheel and one message buffer and moves through
IDLE → ACTIVE → DONE while lines are read, parsed and applied.
"""
from .models import FrameOutcome, SessionResult, SessionState, SessionStats, TerminationReason
from .decoder import DecoderSession

__all__ = [
    "DecoderSession",
    "FrameOutcome",
    "SessionResult",
    "SessionState",
    "SessionStats",
    "TerminationReason",
]
