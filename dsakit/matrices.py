"""Matrix helpers: spiral filling, addition and plain-text formatting."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _spiral_order(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield cell coordinates clockwise from the top-left corner inwards."""
    top, bottom, left, right = 0, rows, 0, cols
    while top < bottom and left < right:
        for col in range(left, right):
            yield top, col
        top += 1
        for row in range(top, bottom):
            yield row, right - 1
        right -= 1
        if top < bottom:
            for col in range(right - 1, left - 1, -1):
                yield bottom - 1, col
            bottom -= 1
        if left < right:
            for row in range(bottom - 1, top - 1, -1):
                yield row, left
            left += 1


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def spiral_fill(values: Sequence[int], rows: int, cols: int) -> list[list[int]]:
    """Lay ``values`` into a rows-by-cols matrix in clockwise spiral order.

    Raises ValueError unless exactly rows * cols values are given.
    """
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    if len(values) != rows * cols:
        raise ValueError("number of values must equal rows * cols")
    grid = [[0] * cols for _ in range(rows)]
    for (row, col), value in zip(_spiral_order(rows, cols), values):
        grid[row][col] = value
    return grid


def sorted_spiral(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a matrix of the same shape holding the entries sorted along a spiral."""
    rows, cols = _shape(matrix)
    ordered = sorted(value for row in matrix for value in row)
    return spiral_fill(ordered, rows, cols)


def add_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the element-wise sum of two matrices of equal shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(first, second)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, entries separated by spaces."""
    return "".join(" ".join(map(str, row)) + "\n" for row in matrix)