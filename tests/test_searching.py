import itertools

import pytest

from dsakit.searching import (
    binary_search,
    max_subarray_sum,
    maximum_toys,
    satisfy_equation,
    search_matrix,
    second_largest_and_smallest,
)


@pytest.mark.parametrize("target", [1, 3, 4, 5, 6])
def test_binary_search_finds_present(target):
    items = [1, 3, 4, 5, 6]
    index = binary_search(items, target)
    assert items[index] == target


@pytest.mark.parametrize("target", [10, 0, 2, -7])
def test_binary_search_missing(target):
    assert binary_search([1, 3, 4, 5, 6], target) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


MATRIX = [
    [1, 4, 7, 11],
    [2, 5, 8, 12],
    [3, 6, 9, 16],
    [10, 13, 14, 17],
]


def test_search_matrix_every_element_found():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value) is True


@pytest.mark.parametrize("target", [0, 15, 18, 100])
def test_search_matrix_missing(target):
    assert search_matrix(MATRIX, target) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False


def _brute_max_subarray(nums):
    return max(sum(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1))


@pytest.mark.parametrize(
    "nums",
    [[-2, 1, -3, 4, -1, 2, 1, -5, 4], [1], [5, 4, -1, 7, 8], [-3, -1, -2], [0, -1, 0]],
)
def test_max_subarray_matches_exhaustive(nums):
    assert max_subarray_sum(nums) == _brute_max_subarray(nums)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_satisfy_equation_example():
    assert satisfy_equation([3, 4, 7, 1, 2, 9, 8]) == [0, 2, 3, 5]


def test_satisfy_equation_result_holds():
    values = [5, 1, 9, 3, 7, 2, 8]
    a, b, c, d = satisfy_equation(values)
    assert len({a, b, c, d}) == 4
    assert values[a] + values[b] == values[c] + values[d]


def test_satisfy_equation_none():
    assert satisfy_equation([1, 2, 4]) == [-1, -1, -1, -1]


def test_second_largest_and_smallest():
    values = [7, 2, 9, 4, 1]
    ordered = sorted(values)
    assert second_largest_and_smallest(values) == (ordered[-2], ordered[1])


def test_second_largest_and_smallest_too_short():
    with pytest.raises(ValueError):
        second_largest_and_smallest([3])


def test_maximum_toys_example():
    assert maximum_toys([1, 12, 5, 111, 200, 1000, 10], 50) == 4


def test_maximum_toys_is_optimal_count():
    costs = [4, 9, 2, 7, 3, 11]
    budget = 15
    count = maximum_toys(costs, budget)
    feasible = [
        size
        for size in range(len(costs) + 1)
        for combo in itertools.combinations(costs, size)
        if sum(combo) <= budget
    ]
    assert count == max(feasible)


def test_maximum_toys_does_not_modify_input():
    costs = [3, 1, 2]
    maximum_toys(costs, 10)
    assert costs == [3, 1, 2]


def test_maximum_toys_zero_budget():
    assert maximum_toys([1, 2, 3], 0) == 0