"""A circular singly linked list addressed by the values it holds."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularLinkedList:
    """A ring of nodes reached through a tail reference.

    Iteration starts at the tail node and goes once round the ring.
    """

    def __init__(self) -> None:
        self._tail: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail
        while True:
            yield node.value
            node = node.next
            if node is self._tail:
                return

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``element``.

        Into an empty list the value becomes the only node and ``element``
        is ignored. Raises ValueError if ``element`` is not present.
        """
        node = _Node(value)
        if self._tail is None:
            self._tail = node
            self._size = 1
            return
        anchor = self._tail
        for _ in range(self._size):
            if anchor.value == element:
                break
            anchor = anchor.next
        else:
            raise ValueError(f"{element!r} is not in the list")
        node.next = anchor.next
        anchor.next = node
        self._size += 1

    def remove(self, element: Any) -> None:
        """Remove the first node holding ``element``, searching from after the tail.

        Raises ValueError if the list is empty or ``element`` is absent.
        """
        if self._tail is None:
            raise ValueError("list is already empty")
        previous = self._tail
        current = previous.next
        for _ in range(self._size):
            if current.value == element:
                break
            previous, current = current, current.next
        else:
            raise ValueError(f"{element!r} is not in the list")
        previous.next = current.next
        if previous is current:
            self._tail = None
        elif current is self._tail:
            self._tail = previous
        current.next = current
        self._size -= 1

    def is_circular(self) -> bool:
        """Tell whether following the links from the tail leads back to it."""
        if self._tail is None:
            return True
        node: _Node | None = self._tail.next
        while node is not None and node is not self._tail:
            node = node.next
        return node is self._tail