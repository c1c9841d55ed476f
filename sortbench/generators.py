"""Input generators for the sorting benchmarks."""

from __future__ import annotations

import math
import random


def permutation(n: int, rng: random.Random | None = None) -> list[int]:
    """Return the numbers 1..n in random order."""
    if n < 0:
        raise ValueError("n must not be negative")
    if rng is None:
        rng = random.Random()
    result = list(range(1, n + 1))
    rng.shuffle(result)
    return result


def merge_worst_case(n: int) -> list[int]:
    """Return an arrangement of 1..n that maximises merge-sort comparisons.

    The left half holds the even values and the right half the odd values,
    each half arranged the same way recursively.
    """
    if n <= 0:
        return []
    if n == 1:
        return [1]
    k = math.ceil(n / 2)
    left = merge_worst_case(k)
    right = merge_worst_case(n - k)
    return [2 * v for v in left] + [2 * v - 1 for v in right]