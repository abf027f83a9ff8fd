"""A set of small non-negative integers drawn from a fixed universe."""

from __future__ import annotations

MAX = 64
"""Members are drawn from ``range(MAX)``."""


def in_universe(number: int) -> bool:
    """True if ``number`` can be a member of an IntSet."""
    return 0 <= number < MAX


class IntSet:
    """Immutable set over ``range(MAX)``; numbers outside it are ignored."""

    __slots__ = ("_members",)

    def __init__(self, *args: int) -> None:
        self._members = frozenset(n for n in args if in_universe(n))

    def __getitem__(self, number: int) -> bool:
        """True if ``number`` is a member."""
        return number in self._members

    def __add__(self, other: object) -> IntSet:
        """Union of two sets; a bare integer counts as a one-member set."""
        if isinstance(other, int):
            other = IntSet(other)
        if not isinstance(other, IntSet):
            return NotImplemented
        result = IntSet()
        result._members = self._members | other._members
        return result

    def __radd__(self, other: object) -> IntSet:
        return self.__add__(other)

    def __str__(self) -> str:
        return "{" + ", ".join(str(n) for n in sorted(self._members)) + "}"

    def __repr__(self) -> str:
        return f"IntSet{tuple(sorted(self._members))!r}"