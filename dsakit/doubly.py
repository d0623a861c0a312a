"""A doubly linked list with positional edits, merge sort and bubble passes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


def _merge(first: _Node | None, second: _Node | None) -> _Node | None:
    """Merge two ascending forward chains; ties take from ``second``."""
    dummy = _Node(None)
    current = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            current.next, first = first, first.next
        else:
            current.next, second = second, second.next
        current = current.next
    current.next = first if first is not None else second
    return dummy.next


def _sort(head: _Node | None) -> _Node | None:
    if head is None or head.next is None:
        return head
    slow, fast = head, head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        assert slow.next is not None
        slow = slow.next
    second = slow.next
    slow.next = None
    return _merge(_sort(head), _sort(second))


class DoublyLinkedList:
    """A chain of nodes linked both ways, with positions counted from 1."""

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

    def backward(self) -> Iterator[Any]:
        """Yield the values from the last node to the first."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def prepend(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = _Node(value)
        node.prev = self._tail
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
            return
        if position == self._size + 1:
            self.append(value)
            return
        before = self._node_at(position - 1)
        after = before.next
        assert after is not None
        node = _Node(value)
        node.prev, node.next = before, after
        before.next = node
        after.prev = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``.

        Raises IndexError unless 1 <= position <= len(self).
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"no node at position {position}")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def merge_sort(self) -> None:
        """Sort the list in ascending order by relinking its nodes."""
        self._head = _sort(self._head)
        previous: _Node | None = None
        node = self._head
        while node is not None:
            node.prev = previous
            previous, node = node, node.next
        self._tail = previous

    def bubble_pass(self) -> bool:
        """Make one bubble-sort pass, swapping adjacent out-of-order values.

        The largest value ends up last. Returns True if anything moved.
        """
        swapped = False
        node = self._head
        while node is not None and node.next is not None:
            following = node.next
            if node.value > following.value:
                node.value, following.value = following.value, node.value
                swapped = True
            node = following
        return swapped