"""Dynamic-programming problems on strings and integer collections."""

from __future__ import annotations

from collections.abc import Sequence


def _lcs_table(x: Sequence, y: Sequence) -> list[list[int]]:
    """Build the table of longest-common-subsequence lengths of all prefixes."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x, 1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(y, 1):
            row[j] = above[j - 1] + 1 if a == b else max(above[j], row[j - 1])
    return table


def lcs_length(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    return _lcs_table(x, y)[len(x)][len(y)]


def lcs(x: str, y: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(x, y)
    i, j = len(x), len(y)
    found: list[str] = []
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            found.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(found))


def longest_palindromic_subsequence_length(text: str) -> int:
    """Return the length of the longest subsequence of ``text`` that is a palindrome."""
    return lcs_length(text[::-1], text)


def common_suffix_length(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common substring ending both sequences."""
    count = 0
    for a, b in zip(reversed(x), reversed(y)):
        if a != b:
            break
        count += 1
    return count


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of a 0/1 knapsack of the given capacity.

    Raises ValueError if the sequences differ in length, or if the capacity
    or any weight is negative.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        if weight < 0:
            raise ValueError("weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def coin_change_ways(coins: Sequence[int], total: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to ``total``.

    Raises ValueError for a negative total or a coin that is not positive.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for coin in coins:
        if coin <= 0:
            raise ValueError("coins must be positive")
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def subset_sum(values: Sequence[int], total: int) -> bool:
    """Tell whether some subset of ``values`` sums exactly to ``total``.

    Raises ValueError for a negative total or negative values.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    reachable = [True] + [False] * total
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        for amount in range(total, value - 1, -1):
            if reachable[amount - value]:
                reachable[amount] = True
    return reachable[total]