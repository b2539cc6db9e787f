"""A priority container that only keeps its highest-ranked items."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

RankKey = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


class _Entry(Generic[T]):
    """Heap slot ordering items by rank, later arrivals first among equals."""

    __slots__ = ("rank", "arrival", "item")

    def __init__(self, rank: Any, arrival: int, item: T) -> None:
        self.rank = rank
        self.arrival = arrival
        self.item = item

    def __lt__(self, other: "_Entry[T]") -> bool:
        if self.rank < other.rank:
            return True
        if other.rank < self.rank:
            return False
        # Equal rank: the newest entry sits closest to the eviction point.
        return self.arrival > other.arrival


class CappedHeap(Generic[T]):
    """Retain the ``capacity`` highest-ranked items offered via :meth:`insert`.

    Items are ranked by ``key(item)`` (the item itself by default). A full heap
    only accepts an item ranking strictly above its current minimum, so the
    earliest of several equally ranked items is the one that stays.
    """

    def __init__(self, capacity: int, key: Optional[RankKey] = None) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._key = key or _identity
        self._entries: List[_Entry[T]] = []
        self._arrivals = itertools.count()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def peek_min(self) -> Optional[T]:
        """Return the lowest-ranked retained item, or ``None`` when empty."""

        if not self._entries:
            return None
        return self._entries[0].item

    def insert(self, item: T) -> bool:
        """Offer ``item`` to the heap and report whether it was retained."""

        if self._capacity == 0:
            return False

        entry = _Entry(self._key(item), next(self._arrivals), item)
        if len(self._entries) < self._capacity:
            heapq.heappush(self._entries, entry)
            return True

        if self._entries[0].rank < entry.rank:
            heapq.heapreplace(self._entries, entry)
            return True
        return False

    def drain_sorted_descending(self) -> List[T]:
        """Empty the heap, returning its items from highest to lowest rank."""

        ascending: List[T] = []
        while self._entries:
            ascending.append(heapq.heappop(self._entries).item)
        ascending.reverse()
        return ascending
