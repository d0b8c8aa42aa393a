"""
Cipher core: the rotating substitution wheel and the decoded message buffer.
"""
from .buffer import MessageBuffer
from .rotor import ALPHABET, RotorWheel

__all__ = ["ALPHABET", "MessageBuffer", "RotorWheel"]
