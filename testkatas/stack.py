"""A last-in, first-out stack."""

from __future__ import annotations

import copy as _copy
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Stack whose copies hold copies of the items."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """The top item, left in place."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """True if the stack holds nothing."""
        return not self._items

    def swap(self, other: Stack[T]) -> None:
        """Exchange contents with ``other``."""
        self._items, other._items = other._items, self._items

    def copy(self) -> Stack[T]:
        """An independent stack holding copies of the same items, in the same order."""
        clone: Stack[T] = Stack()
        clone._items = [_copy.copy(item) for item in self._items]
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Items from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"