"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
import structlog

from prt7_decoder.cipher import MessageBuffer, RotorWheel

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Give every test the default structlog configuration."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def wheel() -> RotorWheel:
    """Rotor wheel at rest (origin at 'A')."""
    return RotorWheel()


@pytest.fixture
def buffer() -> MessageBuffer:
    """Empty message buffer."""
    return MessageBuffer()


@pytest.fixture
def sample_capture_path() -> Path:
    """Capture file with one full transmit cycle decoding to "HOLA MUNDO"."""
    return EXAMPLES_DIR / "sample_capture.txt"


@pytest.fixture
def sample_lines(sample_capture_path) -> list[str]:
    """Lines of the sample capture."""
    return sample_capture_path.read_text().splitlines()
