#!/usr/bin/env python3
"""
Basic usage example for the PRT-7 decoder.

Decodes the bundled capture file, then feeds a few hand-written frames to a
second session one line at a time.
"""

from pathlib import Path

from prt7_decoder.io import FileLineSource, MessagePrinter
from prt7_decoder.logging import configure_logging
from prt7_decoder.session import DecoderSession

CAPTURE = Path(__file__).parent / "sample_capture.txt"


def decode_capture() -> None:
    """Decode a full transmit cycle from a capture file."""
    print("=== Decoding sample capture ===")

    session = DecoderSession()
    with FileLineSource(CAPTURE) as source:
        result = session.run(source, max_lines=14)

    MessagePrinter("pretty").print_result(result)
    print(f"Applied {result.stats.frames_applied} frames, skipped {result.stats.frames_skipped}")


def decode_by_hand() -> None:
    """Feed frames one at a time and watch the wheel move."""
    print("\n=== Feeding frames by hand ===")

    session = DecoderSession()
    for line in ["L,P", "M,2", "L,P", "M,-4", "L,Space", "L,P", "Z,0"]:
        outcome = session.feed_line(line)
        print(f"{line:<8} -> {outcome.value:<16} origin={session.wheel.origin} message={session.message!r}")

    session.finish()


if __name__ == "__main__":
    configure_logging(level="WARNING")
    decode_capture()
    decode_by_hand()
