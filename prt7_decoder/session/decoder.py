"""
Decoding session coordinator.

Owns the rotor wheel and the message buffer for one decode run, feeds each
received line through the parser and the frame processor, and exposes the
assembled message once the line source is exhausted or the line budget is
spent.
"""

import uuid
from dataclasses import replace
from typing import TYPE_CHECKING, Iterator, Optional

from ..cipher import MessageBuffer, RotorWheel
from ..errors import (
    FrameError,
    InvalidRotationError,
    LineSourceError,
    MalformedFrameError,
    SessionClosedError,
    UnknownCommandError,
)
from ..frames import LoadFrame, apply_frame, parse_frame
from ..logging.config import get_session_logger, log_frame_skipped, log_state_transition
from .models import FrameOutcome, SessionResult, SessionState, SessionStats, TerminationReason

if TYPE_CHECKING:
    from ..io.sources import LineSource

session_logger = get_session_logger(__name__)


def _classify(error: FrameError) -> FrameOutcome:
    if isinstance(error, UnknownCommandError):
        return FrameOutcome.UNKNOWN_COMMAND
    if isinstance(error, InvalidRotationError):
        return FrameOutcome.INVALID_ROTATION
    if isinstance(error, MalformedFrameError):
        return FrameOutcome.MALFORMED
    raise error


class DecoderSession:
    """
    One decode run from an empty wheel and buffer to a rendered message.

    Lifecycle:
    IDLE → ACTIVE (on construction) → DONE (source exhausted, source failed,
    line budget reached, or finish() called)

    Rejected lines never touch the wheel or the buffer; they are logged,
    counted and skipped.
    """

    def __init__(self, strict_rotation: bool = False, session_id: Optional[str] = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.strict_rotation = strict_rotation
        self.logger = session_logger.bind(session_id=self.session_id)

        self.state = SessionState.IDLE
        self.wheel = RotorWheel()
        self.buffer = MessageBuffer()
        self.stats = SessionStats()
        self.termination: Optional[TerminationReason] = None
        self.source_error: Optional[str] = None

        self._transition(SessionState.ACTIVE, "session_created")

    @property
    def message(self) -> str:
        """The message decoded so far."""
        return self.buffer.as_text()

    def render(self) -> Iterator[str]:
        """Decoded characters in arrival order."""
        return self.buffer.render()

    def feed_line(self, line: str) -> FrameOutcome:
        """
        Parse and apply one raw line.

        Returns:
            APPLIED when the frame changed the session, otherwise the reason
            the line was skipped

        Raises:
            SessionClosedError: If the session is already DONE
        """
        if self.state is not SessionState.ACTIVE:
            raise SessionClosedError(
                f"Session {self.session_id} is {self.state.value}",
                current_state=self.state.value
            )

        self.stats.lines_read += 1
        self.logger.debug("Frame received", raw_line=line)

        try:
            frame = parse_frame(line, strict_rotation=self.strict_rotation)
        except FrameError as e:
            outcome = _classify(e)
            self.stats.record(outcome)
            log_frame_skipped(
                self.logger,
                outcome=outcome.value,
                raw_line=line,
                reason=str(e),
            )
            return outcome

        decoded = apply_frame(frame, self.wheel, self.buffer)

        if isinstance(frame, LoadFrame):
            self.stats.load_frames += 1
            self.logger.debug("Symbol decoded", symbol=frame.symbol, decoded=decoded,
                              origin=self.wheel.origin)
        else:
            self.stats.map_frames += 1
            self.logger.debug("Wheel rotated", offset=frame.offset, origin=self.wheel.origin)

        return FrameOutcome.APPLIED

    def run(self, source: "LineSource", max_lines: Optional[int] = None) -> SessionResult:
        """
        Read lines from a source until it ends, fails, or max_lines are read.

        A failing source ends the session with SOURCE_FAILED; the error is
        recorded in the result rather than raised.
        """
        if self.state is not SessionState.ACTIVE:
            raise SessionClosedError(
                f"Session {self.session_id} is {self.state.value}",
                current_state=self.state.value
            )

        attempts = 0
        while True:
            if max_lines is not None and attempts >= max_lines:
                reason = TerminationReason.FRAME_BUDGET_REACHED
                break

            try:
                line = source.read_line()
            except LineSourceError as e:
                self.logger.error("Line source failed", source=e.source, error=str(e))
                self.source_error = str(e)
                reason = TerminationReason.SOURCE_FAILED
                break

            attempts += 1
            if line is None:
                reason = TerminationReason.SOURCE_EXHAUSTED
                break

            self.feed_line(line)

        return self.finish(reason)

    def finish(self, reason: TerminationReason = TerminationReason.CLOSED) -> SessionResult:
        """Move to DONE and return the result. Finishing twice keeps the first reason."""
        if self.state is not SessionState.DONE:
            self.termination = reason
            self._transition(SessionState.DONE, reason.value, context=self.stats.as_dict())
        return self.result()

    def result(self) -> SessionResult:
        """Snapshot of the session outcome."""
        return SessionResult(
            session_id=self.session_id,
            message=self.message,
            termination=self.termination or TerminationReason.CLOSED,
            stats=replace(self.stats),
            source_error=self.source_error,
        )

    def _transition(self, new_state: SessionState, trigger: str, context: Optional[dict] = None) -> None:
        log_state_transition(
            self.logger,
            session_id=self.session_id,
            from_state=self.state.value,
            to_state=new_state.value,
            trigger=trigger,
            context=context,
        )
        self.state = new_state

    def __repr__(self) -> str:
        return (f"DecoderSession(id={self.session_id!r}, state={self.state.value}, "
                f"origin={self.wheel.origin!r}, message={self.message!r})")
