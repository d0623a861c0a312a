"""Searching and array problems over integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import combinations


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``items``, or -1 if absent."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix whose rows and columns ascend.

    The search walks from the top-right corner, moving left or down.
    """
    if not matrix or not matrix[0]:
        return False
    rows, cols = len(matrix), len(matrix[0])
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_subarray_sum requires at least one number")
    current = best = nums[0]
    for value in nums[1:]:
        current = value if current < 0 else current + value
        best = max(best, current)
    return best


def satisfy_equation(values: Sequence[int]) -> list[int]:
    """Find indices a, b, c, d with values[a] + values[b] == values[c] + values[d].

    The two pairs use four distinct indices; the lexicographically smallest
    answer is returned, or ``[-1, -1, -1, -1]`` when there is none.
    """
    first_pair: dict[int, tuple[int, int]] = {}
    best: list[int] | None = None
    for i, j in combinations(range(len(values)), 2):
        total = values[i] + values[j]
        if total not in first_pair:
            first_pair[total] = (i, j)
            continue
        a, b = first_pair[total]
        if {i, j} & {a, b}:
            continue
        candidate = [a, b, i, j]
        if best is None or candidate < best:
            best = candidate
    return best if best is not None else [-1, -1, -1, -1]


def second_largest_and_smallest(values: Sequence[int]) -> tuple[int, int]:
    """Return the second largest and second smallest entries.

    Duplicates count separately. Raises ValueError with fewer than two values.
    """
    if len(values) < 2:
        raise ValueError("need at least two values")
    ordered = sorted(values, reverse=True)
    return ordered[1], ordered[-2]


def maximum_toys(costs: Sequence[int], budget: int) -> int:
    """Return how many toys can be bought, cheapest first, within ``budget``."""
    spent = 0
    count = 0
    for cost in sorted(costs):
        if spent + cost <= budget:
            spent += cost
            count += 1
    return count