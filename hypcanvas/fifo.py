from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class Fifo(Generic[T]):
    """First-in first-out queue with O(1) push and shift.

    Items may be ``None``; emptiness is signalled by :class:`IndexError`, never
    by a sentinel value.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, *items: T) -> None:
        self._items.extend(items)

    def shift(self) -> T:
        if not self._items:
            raise IndexError("shift from an empty Fifo")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


__all__ = ["Fifo"]
