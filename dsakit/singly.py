"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class SinglyLinkedList:
    """A chain of nodes linked forwards, with positions counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        """Return the node at 1-based ``position``, which must be in range."""
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def prepend(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``.

        Raises IndexError unless 1 <= position <= len(self) + 1.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"invalid position {position} to insert the node")
        if position == 1:
            self.prepend(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            before = self._node_at(position - 1)
            before.next = _Node(value, before.next)
            self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after node ``position``; position 0 means at the front.

        Raises IndexError unless 0 <= position <= len(self).
        """
        if not 0 <= position <= self._size:
            raise IndexError(f"invalid position {position} to insert the node")
        self.insert_at(position + 1, value)

    def pop_front(self) -> Any:
        """Remove and return the first value; raises IndexError if empty."""
        if self._head is None:
            raise IndexError("list is empty, there is no node to delete")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        removed.next = None
        self._size -= 1
        return removed.value

    def pop_back(self) -> Any:
        """Remove and return the last value; raises IndexError if empty."""
        if self._head is None:
            raise IndexError("list is empty, there is no node to delete")
        if self._size == 1:
            return self.pop_front()
        return self.delete_at(self._size)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``.

        Raises IndexError unless 1 <= position <= len(self).
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"no node at position {position}")
        if position == 1:
            return self.pop_front()
        before = self._node_at(position - 1)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        if removed is self._tail:
            self._tail = before
        removed.next = None
        self._size -= 1
        return removed.value


def merge_sorted_lists(
    first: Iterable[Any], second: Iterable[Any]
) -> SinglyLinkedList:
    """Merge two ascending sequences into one ascending linked list.

    On equal values the one from ``second`` is taken first.
    """
    merged = SinglyLinkedList()
    left, right = iter(first), iter(second)
    missing = object()
    a = next(left, missing)
    b = next(right, missing)
    while a is not missing and b is not missing:
        if a < b:
            merged.append(a)
            a = next(left, missing)
        else:
            merged.append(b)
            b = next(right, missing)
    for pending, rest in ((a, left), (b, right)):
        if pending is not missing:
            merged.append(pending)
            for value in rest:
                merged.append(value)
    return merged