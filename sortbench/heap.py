"""Heap sort on a one-based max-heap."""

from __future__ import annotations

from typing import Any, MutableSequence


def max_heapify(heap: MutableSequence[Any], root: int, length: int) -> None:
    """Sift heap[root] down so the subtree rooted there is a max-heap.

    The heap is one-based: index 0 is unused and ``length`` is the last
    index that belongs to the heap.
    """
    while True:
        left, right = 2 * root, 2 * root + 1
        largest = left if left <= length and heap[left] > heap[root] else root
        if right <= length and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def build_max_heap(heap: MutableSequence[Any], size: int) -> None:
    """Turn heap[1..size] into a max-heap."""
    for i in range(size // 2, 0, -1):
        max_heapify(heap, i, size)


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place in ascending order."""
    size = len(items)
    heap: list[Any] = [None, *items]
    build_max_heap(heap, size)
    for end in range(size, 1, -1):
        heap[1], heap[end] = heap[end], heap[1]
        max_heapify(heap, 1, end - 1)
    items[:] = heap[1:]