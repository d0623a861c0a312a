"""Comparison and distribution sorts over sequences of integers."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence


def _sift_down(heap: MutableSequence[int], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``heap[:size]``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[int]) -> list[int]:
    """Return the items in ascending order, sorted with an in-place max-heap."""
    heap = list(items)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return the items in ascending order, sorted by straight insertion."""
    result: list[int] = []
    for key in items:
        position = len(result)
        while position > 0 and result[position - 1] > key:
            position -= 1
        result.insert(position, key)
    return result


def _counting_pass(values: list[int], divisor: int) -> list[int]:
    """Stable counting sort on the decimal digit selected by ``divisor``."""
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in values:
        buckets[(value // divisor) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order using LSD radix sort.

    Raises ValueError if any item is negative.
    """
    values = list(items)
    if not values:
        return values
    if any(value < 0 for value in values):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(values)
    divisor = 1
    while largest // divisor > 0:
        values = _counting_pass(values, divisor)
        divisor *= 10
    return values


def randomized_quicksort(
    items: Iterable[int], rng: random.Random | None = None
) -> tuple[list[int], int]:
    """Sort with a randomly chosen pivot.

    Returns the sorted list and the number of partition comparisons that
    moved an element below the pivot.
    """
    values = list(items)
    chooser = rng if rng is not None else random.Random()
    comparisons = 0

    def partition(low: int, high: int) -> int:
        nonlocal comparisons
        pivot_at = chooser.randrange(low, high + 1)
        values[high], values[pivot_at] = values[pivot_at], values[high]
        pivot = values[high]
        index = low
        for i in range(low, high):
            if values[i] < pivot:
                values[i], values[index] = values[index], values[i]
                index += 1
                comparisons += 1
        values[high], values[index] = values[index], values[high]
        return index

    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return values, comparisons