"""
Rotating substitution wheel for PRT-7 character decoding.

The wheel holds the 26 uppercase letters in alphabetical order on a circle.
A movable origin marks which letter is currently position 0. Decoding a
letter means stepping forward from the origin by that letter's index in the
canonical alphabet, so every MAP rotation shifts the mapping of all later
LOAD frames.
"""

from typing import Iterator

ALPHABET = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
SPACE = " "


class RotorWheel:
    """
    Circular A-Z wheel with a movable origin.

    The symbol sequence never changes after construction; only the origin
    index moves. Rotation and lookup are O(1) for any offset magnitude.

    Example:
        >>> wheel = RotorWheel()
        >>> wheel.rotate(2)
        >>> wheel.decode("A")
        'C'
    """

    __slots__ = ("_symbols", "_origin")

    def __init__(self) -> None:
        self._symbols = ALPHABET
        self._origin = 0

    @property
    def origin(self) -> str:
        """Letter currently at position 0."""
        return self._symbols[self._origin]

    @property
    def position(self) -> int:
        """Index of the origin letter in the canonical alphabet."""
        return self._origin

    def rotate(self, n: int) -> None:
        """
        Move the origin n positions around the wheel.

        Positive values move forward (A -> B), negative values move backward
        (A -> Z), zero leaves the wheel untouched.
        """
        if n == 0:
            return
        self._origin = (self._origin + n) % len(self._symbols)

    def decode(self, symbol: str) -> str:
        """
        Map one received symbol through the current wheel position.

        Space is never enciphered and symbols outside A-Z pass through
        unchanged.
        """
        if symbol == SPACE:
            return SPACE

        offset = ord(symbol) - ord("A") if len(symbol) == 1 else -1
        if offset < 0 or offset >= len(self._symbols):
            return symbol

        return self._symbols[(self._origin + offset) % len(self._symbols)]

    def sequence(self) -> tuple[str, ...]:
        """The full wheel read from the origin, one lap."""
        return self._symbols[self._origin:] + self._symbols[:self._origin]

    def __iter__(self) -> Iterator[str]:
        return iter(self.sequence())

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"RotorWheel(origin={self.origin!r})"
