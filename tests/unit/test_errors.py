"""Tests for the error classification system."""

from prt7_decoder.errors import (
    ConfigurationError,
    FrameError,
    InvalidRotationError,
    LineSourceError,
    LinkFailureError,
    MalformedFrameError,
    SerialLinkError,
    SessionClosedError,
    UnknownCommandError,
)


class TestErrorClassification:
    """Test error hierarchy and recoverability flags."""

    def test_frame_errors_are_recoverable(self):
        base_error = FrameError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}
        assert base_error.raw_line is None

        malformed = MalformedFrameError("Empty data", raw_line="L,")
        assert isinstance(malformed, FrameError)
        assert malformed.raw_line == "L,"

        unknown = UnknownCommandError("Unknown command", command="Z", data="1", raw_line="Z,1")
        assert isinstance(unknown, FrameError)
        assert (unknown.command, unknown.data) == ("Z", "1")

        rotation = InvalidRotationError("not an integer", data="abc")
        assert rotation.recoverable is True
        assert rotation.data == "abc"

    def test_link_failures_are_not_recoverable(self):
        serial_error = SerialLinkError("gone", port="/dev/ttyUSB0")
        assert isinstance(serial_error, LineSourceError)
        assert isinstance(serial_error, LinkFailureError)
        assert serial_error.recoverable is False
        assert serial_error.source == "/dev/ttyUSB0"

        closed = SessionClosedError("closed", current_state="done")
        assert closed.current_state == "done"
        assert closed.recoverable is False

        config_error = ConfigurationError("bad", errors=["serial.flow"], context={"path": "x"})
        assert config_error.errors == ["serial.flow"]
        assert config_error.context == {"path": "x"}

    def test_frame_and_link_errors_are_disjoint(self):
        assert not issubclass(FrameError, LinkFailureError)
        assert not issubclass(LinkFailureError, FrameError)
