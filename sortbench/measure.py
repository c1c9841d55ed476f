"""Timing and memory measurement of the sorting algorithms."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, MutableSequence

import psutil

from sortbench.composite import INSERTION_LIMIT, composite_sort
from sortbench.heap import heap_sort
from sortbench.insertion import insertion_sort
from sortbench.merge import merge_sort
from sortbench.quick import quick_sort

INT_BYTES = 4
ITEM_BYTES = 4
FRAME_BYTES = 3 * INT_BYTES + ITEM_BYTES


@dataclass(frozen=True)
class Measurement:
    """Elapsed time in whole microseconds and memory estimate in bytes."""

    time_us: float
    memory_bytes: int


def process_memory() -> int:
    """Return the private memory of this process, or its resident size."""
    info = psutil.Process().memory_info()
    return int(getattr(info, "private", info.rss))


def _elapsed_us(start_ns: int, end_ns: int) -> float:
    return float((end_ns - start_ns) // 1000)


def _growth(before: int, after: int) -> int:
    return after - before if after > before else 0


def time_insertion(items: MutableSequence[Any]) -> Measurement:
    """Sort items in place with insertion sort and measure it."""
    before = process_memory()
    start = time.perf_counter_ns()
    insertion_sort(items)
    end = time.perf_counter_ns()
    after = process_memory()
    return Measurement(_elapsed_us(start, end), _growth(before, after))


def time_quick(items: MutableSequence[Any]) -> Measurement:
    """Sort items in place with median-of-three quicksort and measure it.

    Without measurable growth, memory is estimated from the partition depth.
    """
    before = process_memory()
    start = time.perf_counter_ns()
    depth = quick_sort(items)
    end = time.perf_counter_ns()
    after = process_memory()
    memory = after - before if after > before else depth * FRAME_BYTES
    return Measurement(_elapsed_us(start, end), memory)


def time_merge(items: MutableSequence[Any]) -> Measurement:
    """Sort items in place with merge sort and measure it.

    Without measurable growth, memory is the size of the scratch buffer.
    """
    before = process_memory()
    start = time.perf_counter_ns()
    merge_sort(items)
    end = time.perf_counter_ns()
    after = process_memory()
    memory = after - before if after > before else len(items) * ITEM_BYTES
    return Measurement(_elapsed_us(start, end), memory)


def time_heap(items: MutableSequence[Any]) -> Measurement:
    """Sort items in place with heap sort and measure it."""
    before = process_memory()
    start = time.perf_counter_ns()
    heap_sort(items)
    end = time.perf_counter_ns()
    after = process_memory()
    return Measurement(_elapsed_us(start, end), _growth(before, after))


def time_composite(items: MutableSequence[Any]) -> Measurement:
    """Sort items in place with the hybrid sort and measure it.

    Large inputs start from a depth-based estimate; measurable growth wins.
    """
    before = process_memory()
    start = time.perf_counter_ns()
    depth = composite_sort(items)
    end = time.perf_counter_ns()
    after = process_memory()
    memory = depth * FRAME_BYTES if len(items) > INSERTION_LIMIT else 0
    if after > before:
        memory = after - before
    return Measurement(_elapsed_us(start, end), memory)