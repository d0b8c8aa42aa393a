"""
PRT-7 frame grammar and dispatch.

Turns raw "<CMD>,<DATA>" lines into typed frames and applies them against a
rotor wheel and message buffer.
"""
from .models import Frame, FrameCommand, LoadFrame, MapFrame
from .parser import parse_frame
from .processor import apply_frame

__all__ = ["Frame", "FrameCommand", "LoadFrame", "MapFrame", "apply_frame", "parse_frame"]
