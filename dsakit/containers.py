"""Fixed-capacity and unbounded stacks and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class ContainerFull(IndexError):
    """Raised when adding to a container that has no room left."""


class ContainerEmpty(IndexError):
    """Raised when reading or removing from an empty container."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raises ContainerFull when at capacity."""
        if self.is_full():
            raise ContainerFull(f"stack overflow for {item!r}")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raises ContainerEmpty if empty."""
        if not self._items:
            raise ContainerEmpty("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise ContainerEmpty("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


class SingleQueueStack:
    """A stack kept in a single queue, rotated on every push so the top is in front."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, item: Any) -> None:
        self._queue.append(item)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> Any:
        """Remove and return the top item; raises ContainerEmpty if empty."""
        if not self._queue:
            raise ContainerEmpty("stack is empty")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._queue:
            raise ContainerEmpty("stack is empty")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._queue)


class BoundedQueue:
    """A first-in, first-out queue over a fixed row of ``capacity`` slots.

    Slots are used once: after ``capacity`` enqueues the queue stays full,
    even when items have since been dequeued.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._head = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raises ContainerFull when no slot is left."""
        if self.is_full():
            raise ContainerFull(f"queue is full for {item!r}")
        self._slots.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raises ContainerEmpty if empty."""
        if self.is_empty():
            raise ContainerEmpty("queue underflow")
        item = self._slots[self._head]
        self._head += 1
        return item

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise ContainerEmpty("queue is empty")
        return self._slots[self._head]

    def is_empty(self) -> bool:
        return self._head == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._head

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._slots[self._head:])


class LinkedQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raises ContainerEmpty if empty."""
        if not self._items:
            raise ContainerEmpty("queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)