"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any


class LRUCache:
    """Maps keys to values, evicting the least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Any, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def get(self, key: Any) -> Any:
        """Return the value for ``key`` and mark it most recent, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least recent entry if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
            self._entries[key] = value
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value