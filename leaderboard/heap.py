from __future__ import annotations

from enum import Enum
from operator import attrgetter
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .errors import EmptyLeaderboardError

T = TypeVar("T")


class Orientation(str, Enum):
    """Which end of the score range surfaces at the root."""

    MAX = "max"
    MIN = "min"

    def precedes(self, a: Any, b: Any) -> bool:
        # strict: equal scores never swap
        if self is Orientation.MAX:
            return a > b
        return a < b


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


class PriorityHeap(Generic[T]):
    """Array-backed binary heap ordered by a score key.

    The orientation is fixed at construction. Items are compared through
    ``key`` (``item.score`` by default) and searched through ``name``
    (``item.name`` by default).
    """

    def __init__(
        self,
        orientation: Orientation | str = Orientation.MAX,
        key: Callable[[T], Any] = attrgetter("score"),
        name: Callable[[T], str] = attrgetter("name"),
    ) -> None:
        self._orientation = Orientation(orientation)
        self._key = key
        self._name = name
        self._items: List[T] = []

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def _before(self, i: int, j: int) -> bool:
        return self._orientation.precedes(self._key(self._items[i]), self._key(self._items[j]))

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, i: int) -> None:
        while i > 0 and self._before(i, _parent(i)):
            self._swap(i, _parent(i))
            i = _parent(i)

    def _sift_down(self, i: int) -> None:
        n = len(self._items)
        while True:
            target = i
            left, right = _left(i), _right(i)
            if left < n and self._before(left, target):
                target = left
            if right < n and self._before(right, target):
                target = right
            if target == i:
                return
            self._swap(i, target)
            i = target

    def insert(self, item: T) -> None:
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def extract_top(self) -> T:
        """Remove and return the root entry.

        Raises EmptyLeaderboardError without touching state when empty.
        """
        if not self._items:
            raise EmptyLeaderboardError()
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek_top(self) -> T:
        if not self._items:
            raise EmptyLeaderboardError()
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def find_by_name(self, name: str) -> Optional[T]:
        """Linear scan in storage order; first match wins, None when absent."""
        for item in self._items:
            if self._name(item) == name:
                return item
        return None

    def to_ordered_snapshot(self) -> List[T]:
        """Entries in heap-array order. Deliberately not sorted by score."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PriorityHeap(orientation={self._orientation.value!r}, size={len(self._items)})"
