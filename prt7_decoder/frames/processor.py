"""Frame dispatch against the rotor wheel and message buffer."""

from typing import Optional

from ..cipher import MessageBuffer, RotorWheel
from .models import Frame, LoadFrame, MapFrame


def apply_frame(frame: Frame, wheel: RotorWheel, buffer: MessageBuffer) -> Optional[str]:
    """
    Apply one frame.

    A LoadFrame decodes its symbol through the wheel and appends the result
    to the buffer; the decoded character is returned. A MapFrame rotates the
    wheel and returns None.
    """
    if isinstance(frame, LoadFrame):
        decoded = wheel.decode(frame.symbol)
        buffer.append(decoded)
        return decoded

    if isinstance(frame, MapFrame):
        wheel.rotate(frame.offset)
        return None

    raise TypeError(f"Not a PRT-7 frame: {frame!r}")
