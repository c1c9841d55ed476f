import random

import pytest

from sortbench.generators import merge_worst_case, permutation
from sortbench.merge import merge_sort


@pytest.mark.parametrize("n", [0, 1, 2, 7, 100])
def test_permutation_contains_each_value_once(n):
    assert sorted(permutation(n, random.Random(3))) == list(range(1, n + 1))


def test_permutation_is_reproducible_with_seed():
    first = permutation(50, random.Random(42))
    second = permutation(50, random.Random(42))
    assert sorted(first) == list(range(1, 51))
    assert first == second
    assert first != list(range(1, 51))


def test_permutation_without_rng():
    assert sorted(permutation(20)) == list(range(1, 21))


def test_permutation_rejects_negative():
    with pytest.raises(ValueError):
        permutation(-1)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13, 64, 500])
def test_merge_worst_case_is_permutation(n):
    assert sorted(merge_worst_case(n)) == list(range(1, n + 1))


@pytest.mark.parametrize("n", [0, -4])
def test_merge_worst_case_empty(n):
    assert merge_worst_case(n) == []


def test_merge_worst_case_single():
    assert merge_worst_case(1) == [1]


def test_merge_worst_case_four():
    assert merge_worst_case(4) == [4, 2, 3, 1]


def test_merge_worst_case_halves_split_even_and_odd():
    values = merge_worst_case(9)
    left, right = values[:5], values[5:]
    assert all(v % 2 == 0 for v in left)
    assert all(v % 2 == 1 for v in right)


def test_merge_worst_case_sorts():
    values = merge_worst_case(33)
    merge_sort(values)
    assert values == list(range(1, 34))