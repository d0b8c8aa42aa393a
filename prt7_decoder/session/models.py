"""
Session data models for the decoding lifecycle.

This module defines the session states, the per-line outcome
classification, running counters and the final immutable result.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional


class SessionState(str, Enum):
    """Decoding session lifecycle states."""
    IDLE = "idle"
    ACTIVE = "active"
    DONE = "done"


class FrameOutcome(str, Enum):
    """What happened to one received line."""
    APPLIED = "applied"
    MALFORMED = "malformed"
    UNKNOWN_COMMAND = "unknown_command"
    INVALID_ROTATION = "invalid_rotation"


class TerminationReason(str, Enum):
    """Why a session stopped reading lines."""
    SOURCE_EXHAUSTED = "source_exhausted"
    FRAME_BUDGET_REACHED = "frame_budget_reached"
    SOURCE_FAILED = "source_failed"
    CLOSED = "closed"


@dataclass
class SessionStats:
    """Running counters for one session."""
    lines_read: int = 0
    load_frames: int = 0
    map_frames: int = 0
    malformed: int = 0
    unknown_commands: int = 0
    invalid_rotations: int = 0

    @property
    def frames_applied(self) -> int:
        return self.load_frames + self.map_frames

    @property
    def frames_skipped(self) -> int:
        return self.malformed + self.unknown_commands + self.invalid_rotations

    def record(self, outcome: FrameOutcome) -> None:
        """Count a rejected line by its outcome."""
        if outcome is FrameOutcome.MALFORMED:
            self.malformed += 1
        elif outcome is FrameOutcome.UNKNOWN_COMMAND:
            self.unknown_commands += 1
        elif outcome is FrameOutcome.INVALID_ROTATION:
            self.invalid_rotations += 1

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["frames_applied"] = self.frames_applied
        data["frames_skipped"] = self.frames_skipped
        return data


@dataclass(frozen=True)
class SessionResult:
    """Final outcome of a decoding session."""
    session_id: str
    message: str
    termination: TerminationReason
    stats: SessionStats
    source_error: Optional[str] = None

    @property
    def source_failed(self) -> bool:
        return self.termination is TerminationReason.SOURCE_FAILED
