from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .complex import Complex
from .metric import distance

T = TypeVar("T")


class PointBag(Generic[T]):
    """Bag of disk points with payloads, searchable by hyperbolic distance.

    Lookups scan every entry; bags live for a single traversal.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[Complex, T]] = []

    def push(self, *entries: Tuple[Complex, T]) -> None:
        self._entries.extend(entries)

    def search(self, center: Complex, radius: float) -> Iterator[Tuple[Complex, T]]:
        """Yield entries strictly closer than ``radius`` to ``center``."""

        for point, payload in self._entries:
            if distance(center, point) < radius:
                yield point, payload

    def any(self, center: Complex, radius: float) -> Optional[Tuple[Complex, T]]:
        return next(self.search(center, radius), None)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[Complex, T]]:
        return iter(self._entries)


__all__ = ["PointBag"]
