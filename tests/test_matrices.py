import pytest

from dsakit.matrices import add_matrices, format_matrix, sorted_spiral, spiral_fill

SOURCE_MATRIX = [[2, 5, 12], [22, 45, 55], [1, 6, 8], [13, 56, 10]]


def test_sorted_spiral_source_example():
    assert sorted_spiral(SOURCE_MATRIX) == [
        [1, 2, 5],
        [45, 55, 6],
        [22, 56, 8],
        [13, 12, 10],
    ]


def test_sorted_spiral_keeps_shape_and_entries():
    result = sorted_spiral(SOURCE_MATRIX)
    assert len(result) == len(SOURCE_MATRIX)
    assert all(len(row) == 3 for row in result)
    flat = sorted(v for row in result for v in row)
    assert flat == sorted(v for row in SOURCE_MATRIX for v in row)


def test_spiral_fill_first_row_and_last_column():
    values = list(range(1, 21))
    grid = spiral_fill(values, 4, 5)
    assert grid[0] == values[:5]
    assert [row[-1] for row in grid[1:]] == values[5:8]


def test_spiral_fill_single_row_and_column():
    assert spiral_fill([3, 1, 2], 1, 3) == [[3, 1, 2]]
    assert spiral_fill([3, 1, 2], 3, 1) == [[3], [1], [2]]


def test_spiral_fill_empty():
    assert spiral_fill([], 0, 0) == []


def test_spiral_fill_rejects_wrong_count():
    with pytest.raises(ValueError):
        spiral_fill([1, 2, 3], 2, 2)


def test_add_matrices_with_zero_is_identity():
    zeros = [[0, 0, 0], [0, 0, 0]]
    matrix = [[1, -2, 3], [4, 5, -6]]
    assert add_matrices(matrix, zeros) == matrix


def test_add_matrices_is_commutative():
    a = [[1, 2], [3, 4]]
    b = [[7, -1], [0, 9]]
    assert add_matrices(a, b) == add_matrices(b, a)


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1], [2]])


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2\n3 4\n"