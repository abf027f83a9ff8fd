"""A string whose storage grows to fit exactly what it holds.

Capacity tracks the size of the storage rather than the text: it equals the
length after construction or concatenation, is carried over on copy, and is
kept when the text is cut short by writing a NUL character.
"""

from __future__ import annotations

from typing import TextIO

_TERMINATOR = "\0"


class GrowableString:
    """Mutable string with capacity sized to its contents."""

    __slots__ = ("_text", "_capacity")

    def __init__(self, value: str | GrowableString = "") -> None:
        if isinstance(value, GrowableString):
            self._text = value._text
            self._capacity = value._capacity
        elif isinstance(value, str):
            self._text = value.split(_TERMINATOR, 1)[0]
            self._capacity = len(self._text)
        else:
            raise TypeError(f"cannot build GrowableString from {type(value).__name__}")

    @classmethod
    def _coerce(cls, value: object) -> GrowableString | None:
        if isinstance(value, GrowableString):
            return value
        if isinstance(value, str):
            return cls(value)
        return None

    def __copy__(self) -> GrowableString:
        return GrowableString(self)

    def capacity(self) -> int:
        """Number of characters the storage can hold."""
        return self._capacity

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
        """Replace one character; writing NUL cuts the text at ``index``."""
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

    def substr(self, start_pos: int, count: int) -> GrowableString:
        """Up to ``count`` characters starting at ``start_pos``."""
        if start_pos < 0:
            raise IndexError("start_pos must not be negative")
        if count <= 0:
            return GrowableString()
        return GrowableString(self._text[start_pos : start_pos + count])

    def split(self, delim: str) -> list[GrowableString]:
        """Pieces of the text between occurrences of ``delim``."""
        if not isinstance(delim, str) or len(delim) != 1:
            raise ValueError("a single delimiter character is required")
        return [GrowableString(piece) for piece in self._text.split(delim)]

    def find(self, target: str | GrowableString, start_pos: int = 0) -> int:
        """Index of ``target`` at or after ``start_pos``, or -1 if absent.

        An empty target is never found.
        """
        needle = self._coerce(target)
        if needle is None:
            raise TypeError("target must be a string")
        if start_pos < 0:
            raise IndexError("start_pos must not be negative")
        if not needle._text or start_pos >= len(self._text):
            return -1
        return self._text.find(needle._text, start_pos)

    def swap(self, other: GrowableString) -> None:
        """Exchange contents and capacity with ``other``."""
        self._text, other._text = other._text, self._text
        self._capacity, other._capacity = other._capacity, self._capacity

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

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self == rhs or self < rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self <= rhs

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    def __add__(self, other: object) -> GrowableString:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return GrowableString(self._text + rhs._text)

    def __radd__(self, other: object) -> GrowableString:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __iadd__(self, other: object) -> GrowableString:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._text += rhs._text
        self._capacity = len(self._text)
        return self

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"GrowableString({self._text!r})"

    @classmethod
    def read(cls, stream: TextIO) -> GrowableString:
        """Read the next whitespace-delimited word from ``stream``.

        Returns an empty string when the stream has no more words.
        """
        chars: list[str] = []
        while True:
            ch = stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if chars:
                    break
                continue
            chars.append(ch)
        return cls("".join(chars))