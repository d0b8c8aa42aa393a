"""
PRT-7 line parser.

Each line received from the link has the form "<CMD>,<DATA>":

    L,H       load the symbol H
    L,Space   load a space
    M,2       rotate the wheel two positions forward
    M,-3      rotate the wheel three positions backward

The command is the first character of the line and the data is everything
after the last comma in the line.
"""

import re
from typing import Optional

from ..errors import InvalidRotationError, MalformedFrameError, UnknownCommandError
from .models import Frame, FrameCommand, LoadFrame, MapFrame

DELIMITER = ","
SPACE_TOKEN = "space"

# Leading whitespace, optional sign, leading digits; trailing text is ignored
_PERMISSIVE_INT = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"[+-]?[0-9]+")


def parse_frame(line: str, *, strict_rotation: bool = False) -> Frame:
    """
    Parse one raw line into a frame.

    Args:
        line: Raw line from the link; a trailing CR/LF is ignored
        strict_rotation: Reject MAP data that is not a signed integer instead
            of treating it as a zero rotation

    Returns:
        LoadFrame or MapFrame

    Raises:
        MalformedFrameError: Empty line, missing comma, empty command or empty data
        UnknownCommandError: Command character is not L/M (any case)
        InvalidRotationError: MAP data is not an integer and strict_rotation is set
    """
    if line is None:
        raise MalformedFrameError("Empty frame", raw_line=line)

    text = line.rstrip("\r\n")
    if not text:
        raise MalformedFrameError("Empty frame", raw_line=line)

    split_at = text.rfind(DELIMITER)
    if split_at == -1:
        raise MalformedFrameError("Missing ',' delimiter", raw_line=line)
    if split_at == 0:
        raise MalformedFrameError("Empty command", raw_line=line)
    if split_at == len(text) - 1:
        raise MalformedFrameError("Empty data", raw_line=line)

    command_char = text[0]
    data = text[split_at + 1:]

    command = FrameCommand.from_char(command_char)
    if command is FrameCommand.LOAD:
        return LoadFrame(symbol=parse_load_data(data))
    if command is FrameCommand.MAP:
        return MapFrame(offset=parse_rotation(data, strict=strict_rotation, raw_line=line))

    raise UnknownCommandError(
        f"Unknown command {command_char!r}",
        command=command_char,
        data=data,
        raw_line=line,
    )


def parse_load_data(data: str) -> str:
    """Symbol carried by LOAD data: the space token or the first character."""
    if data.lower() == SPACE_TOKEN:
        return " "
    return data[0]


def parse_rotation(data: str, *, strict: bool = False, raw_line: Optional[str] = None) -> int:
    """
    Rotation offset carried by MAP data.

    Permissive parsing reads an optional sign and the leading digits, and
    yields 0 when there are none. Strict parsing requires the whole
    (whitespace-trimmed) data to be a signed decimal integer.
    """
    if strict:
        candidate = data.strip()
        if not _STRICT_INT.fullmatch(candidate):
            raise InvalidRotationError(
                f"Rotation {data!r} is not an integer",
                data=data,
                raw_line=raw_line,
            )
        return int(candidate)

    match = _PERMISSIVE_INT.match(data)
    if match is None:
        return 0
    return int(match.group(1))
