"""Bottom-up merge sort with a scratch buffer."""

from __future__ import annotations

from typing import Any, MutableSequence


def merge(
    items: MutableSequence[Any],
    scratch: MutableSequence[Any],
    left: int,
    mid: int,
    right: int,
) -> None:
    """Merge the sorted runs items[left..mid] and items[mid+1..right].

    ``scratch`` must be at least as long as ``right + 1``; ties keep the
    element from the left run first.
    """
    scratch[left : right + 1] = items[left : right + 1]
    i, j, k = left, mid + 1, left
    while i <= mid and j <= right:
        if scratch[i] <= scratch[j]:
            items[k] = scratch[i]
            i += 1
        else:
            items[k] = scratch[j]
            j += 1
        k += 1
    items[k : right + 1] = [*scratch[i : mid + 1], *scratch[j : right + 1]]


def merge_sort(
    items: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Sort items[left..right] (inclusive) in place, stably."""
    if right is None:
        right = len(items) - 1
    n = right - left + 1
    scratch = list(items)
    width = 1
    while width < n:
        for start in range(left, right, 2 * width):
            mid = min(start + width - 1, right)
            end = min(start + 2 * width - 1, right)
            merge(items, scratch, start, mid, end)
        width *= 2