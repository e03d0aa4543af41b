import math
from collections import Counter

import pytest

from algokit.combinatorics import (
    generate_parenthesis,
    pascal_triangle,
    subsets,
    subsets_with_dup,
)
from algokit.stacks import is_valid_parentheses


@pytest.mark.parametrize("n", range(1, 7))
def test_generate_parenthesis_all_balanced_and_distinct(n):
    result = generate_parenthesis(n)
    assert len(set(result)) == len(result)
    assert all(len(s) == 2 * n and is_valid_parentheses(s) for s in result)
    assert len(result) == math.comb(2 * n, n) // (n + 1)


@pytest.mark.parametrize("n", range(1, 6))
def test_generate_parenthesis_order(n):
    result = generate_parenthesis(n)
    assert result == sorted(result)
    assert result[0] == "(" * n + ")" * n
    assert result[-1] == "()" * n


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


def test_generate_parenthesis_negative():
    with pytest.raises(ValueError):
        generate_parenthesis(-1)


def test_subsets_order():
    assert subsets([1, 2]) == [[], [1], [2], [1, 2]]


@pytest.mark.parametrize("nums", [[], [0], [1, 2, 3], [5, -1, 7, 9]])
def test_subsets_complete(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({frozenset(s) for s in result}) == len(result)
    for subset in result:
        positions = [nums.index(x) for x in subset]
        assert positions == sorted(positions)


@pytest.mark.parametrize("nums", [[1, 2, 2], [4, 4, 4, 1, 4], [0], [3, 1, 3, 1]])
def test_subsets_with_dup_distinct(nums):
    result = subsets_with_dup(nums)
    as_tuples = [tuple(s) for s in result]
    assert len(set(as_tuples)) == len(as_tuples)
    assert all(list(s) == sorted(s) for s in result)
    counts = Counter(nums)
    assert all(not Counter(s) - counts for s in result)
    assert len(result) == math.prod(c + 1 for c in counts.values())


def test_subsets_with_dup_without_duplicates_matches_subsets():
    nums = [1, 2, 3]
    assert sorted(subsets_with_dup(nums)) == sorted(subsets(nums))


def test_subsets_with_dup_empty():
    assert subsets_with_dup([]) == [[]]


@pytest.mark.parametrize("rows", [1, 2, 5, 10])
def test_pascal_triangle_binomials(rows):
    triangle = pascal_triangle(rows)
    assert len(triangle) == rows
    for i, row in enumerate(triangle):
        assert row == [math.comb(i, j) for j in range(i + 1)]
        assert sum(row) == 2**i


def test_pascal_triangle_first_row():
    assert pascal_triangle(1) == [[1]]


@pytest.mark.parametrize("rows", [0, -3])
def test_pascal_triangle_rejects_small(rows):
    with pytest.raises(ValueError):
        pascal_triangle(rows)