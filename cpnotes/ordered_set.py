"""A sorted set with rank queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedSet:
    """Distinct items kept in order, with k-th element and rank lookups."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(items))

    def add(self, item: Any) -> bool:
        """Insert ``item``; return False if it was already present."""
        if item in self._items:
            return False
        self._items.add(item)
        return True

    def find_by_order(self, index: int) -> Any:
        """The item at zero-based ``index`` in sorted order."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def order_of_key(self, key: Any) -> int:
        """How many items are strictly smaller than ``key``."""
        return self._items.bisect_left(key)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)