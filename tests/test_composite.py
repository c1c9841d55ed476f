import random

import pytest

from sortbench.composite import INSERTION_LIMIT, composite_sort


@pytest.mark.parametrize("size", [0, 1, 2, 30, 75, 76, 100, 500, 5000])
def test_sorts_random(size):
    rng = random.Random(size)
    data = list(range(1, size + 1))
    rng.shuffle(data)
    composite_sort(data)
    assert data == list(range(1, size + 1))


def test_small_input_reports_zero_depth():
    data = list(range(INSERTION_LIMIT, 0, -1))
    assert composite_sort(data) == 0
    assert data == sorted(data)


def test_large_input_partitions():
    rng = random.Random(9)
    data = [rng.randint(0, 10**6) for _ in range(INSERTION_LIMIT + 1)]
    expected = sorted(data)
    depth = composite_sort(data)
    assert data == expected
    assert depth >= 1


def test_duplicates_large():
    data = [3] * 4000 + [1] * 4000
    depth = composite_sort(data)
    assert data == [1] * 4000 + [3] * 4000
    assert depth >= 1


def test_reverse_sorted_large():
    data = list(range(3000, 0, -1))
    composite_sort(data)
    assert data == list(range(1, 3001))