"""Append-only accumulator for decoded characters."""

from typing import Iterator


class MessageBuffer:
    """
    Ordered, append-only sequence of decoded characters.

    Elements keep their position and value once appended; there is no
    removal. Rendering walks the characters in insertion order.
    """

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, char: str) -> None:
        """Add a decoded character at the tail."""
        self._chars.append(char)

    def render(self) -> Iterator[str]:
        """Yield the decoded characters head to tail."""
        yield from self._chars

    def as_text(self) -> str:
        """The assembled message as one string with no separators."""
        return "".join(self._chars)

    def __iter__(self) -> Iterator[str]:
        return self.render()

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"MessageBuffer({self.as_text()!r})"
