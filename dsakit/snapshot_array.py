"""An array whose past states can be read back by snapshot id."""

from __future__ import annotations

from bisect import bisect_right


class SnapshotArray:
    """A fixed-length array of integers, all initially 0, with snapshots.

    Only changed positions are recorded, so snapshots are cheap.
    """

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self.length = length
        self._current_snap = 0
        self._snap_ids: dict[int, list[int]] = {}
        self._values: dict[int, list[int]] = {}

    def __len__(self) -> int:
        return self.length

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(f"index {index} out of range")

    def set(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value`` in the current state."""
        self._check_index(index)
        ids = self._snap_ids.setdefault(index, [])
        values = self._values.setdefault(index, [])
        if ids and ids[-1] == self._current_snap:
            values[-1] = value
        else:
            ids.append(self._current_snap)
            values.append(value)

    def snap(self) -> int:
        """Take a snapshot and return its id: the number of earlier snapshots."""
        snap_id = self._current_snap
        self._current_snap += 1
        return snap_id

    def get(self, index: int, snap_id: int) -> int:
        """Return the value at ``index`` as it was when snapshot ``snap_id`` was taken."""
        self._check_index(index)
        ids = self._snap_ids.get(index, [])
        position = bisect_right(ids, snap_id)
        return self._values[index][position - 1] if position else 0