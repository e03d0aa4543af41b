"""A fixed-capacity cache that evicts the least recently used entry."""

from collections import OrderedDict
from typing import Hashable

MISSING = -1


class LRUCache:
    """Maps keys to values, keeping at most ``capacity`` entries.

    Reading or writing a key marks it as the most recently used one. When a
    new key arrives at a full cache, the least recently used key is dropped.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: "OrderedDict[Hashable, int]" = OrderedDict()

    def get(self, key: Hashable) -> int:
        """Return the value stored for ``key``, or ``MISSING`` (-1) if absent."""
        if key not in self._items:
            return MISSING
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._items:
            self._items.move_to_end(key)
        elif len(self._items) >= self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items