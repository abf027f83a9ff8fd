"""A string with a fixed capacity of seven characters.

Text beyond the capacity is silently truncated, both on construction and
on concatenation. A NUL character ends the text, as it would in a C string.
"""

from __future__ import annotations

from functools import total_ordering

STRING_SIZE = 8
"""Size of the backing storage, including room for the terminator."""

_TERMINATOR = "\0"


def _clip(text: str) -> str:
    return text.split(_TERMINATOR, 1)[0][: STRING_SIZE - 1]


@total_ordering
class FixedString:
    """Mutable string limited to ``STRING_SIZE - 1`` characters."""

    __slots__ = ("_text",)

    def __init__(self, value: str | FixedString = "") -> None:
        if isinstance(value, FixedString):
            self._text = value._text
        elif isinstance(value, str):
            self._text = _clip(value)
        else:
            raise TypeError(f"cannot build FixedString from {type(value).__name__}")

    @staticmethod
    def _coerce(value: object) -> FixedString | None:
        if isinstance(value, FixedString):
            return value
        if isinstance(value, str):
            return FixedString(value)
        return None

    def capacity(self) -> int:
        """Largest number of characters the string can hold."""
        return STRING_SIZE - 1

    def length(self) -> int:
        """Number of characters currently held."""
        return len(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int) -> str:
        """Character at ``index``; the position just past the end reads as NUL."""
        if not 0 <= index <= len(self._text):
            raise IndexError(f"index {index} out of range")
        if index == len(self._text):
            return _TERMINATOR
        return self._text[index]

    def __setitem__(self, index: int, ch: str) -> None:
        """Replace one character; writing NUL cuts the string at ``index``."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("a single character is required")
        if ch == _TERMINATOR:
            if not 0 <= index <= len(self._text):
                raise IndexError(f"index {index} out of range")
            self._text = self._text[:index]
            return
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range")
        self._text = self._text[:index] + ch + self._text[index + 1 :]

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._text == rhs._text

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._text < rhs._text

    def __add__(self, other: object) -> FixedString:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return FixedString(self._text + rhs._text)

    def __iadd__(self, other: object) -> FixedString:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._text = _clip(self._text + rhs._text)
        return self

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FixedString({self._text!r})"

    def find(self, target: str | FixedString, start_pos: int = 0) -> int:
        """Index of ``target`` at or after ``start_pos``, or -1 if absent.

        An empty target is always found at 0.
        """
        needle = self._coerce(target)
        if needle is None:
            raise TypeError("target must be a string")
        if not needle._text:
            return 0
        if start_pos < 0 or start_pos >= len(self._text):
            return -1
        return self._text.find(needle._text, start_pos)

    def substr(self, start_pos: int, count: int) -> FixedString:
        """Up to ``count`` characters starting at ``start_pos``."""
        if count < 0:
            raise ValueError("count must not be negative")
        if start_pos < 0 or start_pos >= len(self._text):
            return FixedString()
        return FixedString(self._text[start_pos : start_pos + count])

    def split(self, ch: str) -> list[FixedString]:
        """Pieces of the string between occurrences of ``ch``."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("a single delimiter character is required")
        return [FixedString(piece) for piece in self._text.split(ch)]