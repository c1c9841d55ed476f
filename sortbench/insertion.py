"""In-place insertion sort."""

from __future__ import annotations

from typing import Any, MutableSequence


def insertion_sort(
    items: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Sort items[left..right] (inclusive) in place."""
    if right is None:
        right = len(items) - 1
    for i in range(left + 1, right + 1):
        value = items[i]
        j = i - 1
        while j >= left and value < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value