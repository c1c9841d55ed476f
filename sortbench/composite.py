"""Hybrid sort: insertion sort for short inputs, quicksort with cutoff otherwise."""

from __future__ import annotations

from typing import Any, MutableSequence

from sortbench.insertion import insertion_sort
from sortbench.quick import median_partition

INSERTION_LIMIT = 75
CUTOFF = 16


def composite_sort(items: MutableSequence[Any]) -> int:
    """Sort items in place.

    Inputs of at most INSERTION_LIMIT elements use insertion sort; larger
    ones use median-of-three quicksort that finishes ranges spanning at most
    CUTOFF positions with insertion sort. Returns the deepest partition level
    reached (0 when insertion sort handled everything).
    """
    size = len(items)
    if size <= INSERTION_LIMIT:
        insertion_sort(items, 0, size - 1)
        return 0
    max_depth = 0
    pending = [(0, size - 1, 0)]
    while pending:
        lo, hi, depth = pending.pop()
        max_depth = max(max_depth, depth)
        if hi - lo <= CUTOFF:
            insertion_sort(items, lo, hi)
            continue
        p = median_partition(items, lo, hi)
        pending.append((lo, p - 1, depth + 1))
        pending.append((p + 1, hi, depth + 1))
    return max_depth