"""Quicksort variants using Lomuto partitioning."""

from __future__ import annotations

from typing import Any, MutableSequence


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition items[left..right] around items[right]; return its final index."""
    pivot = items[right]
    i = left - 1
    for j in range(left, right):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    i += 1
    items[i], items[right] = items[right], items[i]
    return i


def median_of_three(
    items: MutableSequence[Any], left: int, mid: int, right: int
) -> int:
    """Return whichever of the three indices holds the median value."""
    a, b, c = items[left], items[mid], items[right]
    if a <= b <= c or c <= b <= a:
        return mid
    if b <= a <= c or c <= a <= b:
        return left
    return right


def median_partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition around the median of first, middle and last elements."""
    if right - left > 2:
        mid = left + (right - left) // 2
        median = median_of_three(items, left, mid, right)
        if median != right:
            items[median], items[right] = items[right], items[median]
    return partition(items, left, right)


def quick_sort(
    items: MutableSequence[Any], left: int = 0, right: int | None = None
) -> int:
    """Sort items[left..right] in place with median-of-three quicksort.

    Returns the deepest level of partitioning reached.
    """
    if right is None:
        right = len(items) - 1
    max_depth = 0
    pending = [(left, right, 0)]
    while pending:
        lo, hi, depth = pending.pop()
        max_depth = max(max_depth, depth)
        if lo < hi:
            p = median_partition(items, lo, hi)
            pending.append((lo, p - 1, depth + 1))
            pending.append((p + 1, hi, depth + 1))
    return max_depth


def _tail_sort(items: MutableSequence[Any], left: int, right: int, depth: int) -> int:
    deepest = depth
    while left < right:
        q = partition(items, left, right)
        if q - left < right - q:
            deepest = max(deepest, _tail_sort(items, left, q - 1, depth + 1))
            left = q + 1
        else:
            deepest = max(deepest, _tail_sort(items, q + 1, right, depth + 1))
            right = q - 1
    return deepest


def tail_quick_sort(
    items: MutableSequence[Any], left: int = 0, right: int | None = None
) -> int:
    """Sort in place, recursing on the smaller side and looping on the larger.

    Returns the deepest recursion level reached.
    """
    if right is None:
        right = len(items) - 1
    return _tail_sort(items, left, right, 0)