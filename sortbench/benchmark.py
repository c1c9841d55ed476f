"""Worst-case and average-case benchmark runs and their CSV output."""

from __future__ import annotations

import csv
import os
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from sortbench.generators import merge_worst_case, permutation
from sortbench.measure import (
    Measurement,
    time_composite,
    time_heap,
    time_insertion,
    time_merge,
    time_quick,
)

DEFAULT_SIZES = (500, 1000, 2000, 3000, 4000, 5000)
WORST_RUNS = 100
AVERAGE_RUNS = 1000
PROGRESS_EVERY = 10

CSV_HEADER = (
    "Size",
    "Insertion_Time(ms)",
    "Insertion_Memory(KB)",
    "Quick_Time(ms)",
    "Quick_Memory(KB)",
    "Merge_Time(ms)",
    "Merge_Memory(KB)",
    "Heap_Time(ms)",
    "Heap_Memory(KB)",
    "Composite_Time(ms)",
    "Composite_Memory(KB)",
)

_TIMERS = (time_insertion, time_quick, time_merge, time_heap, time_composite)

_ZERO = Measurement(0.0, 0)


@dataclass(frozen=True)
class ResultRow:
    """Measurements of every algorithm for one input size."""

    size: int
    insertion: Measurement
    quick: Measurement
    merge: Measurement
    heap: Measurement
    composite: Measurement

    @property
    def measurements(self) -> tuple[Measurement, ...]:
        return (self.insertion, self.quick, self.merge, self.heap, self.composite)

    def csv_fields(self) -> list[str]:
        """Return the row as CSV text: times in ms, memory in KB."""
        fields = [str(self.size)]
        for m in self.measurements:
            fields.append(f"{m.time_us / 1000.0:g}")
            fields.append(f"{m.memory_bytes / 1024.0:g}")
        return fields


def _check_runs(runs: int) -> None:
    if runs <= 0:
        raise ValueError("runs must be positive")


def _slower(current: Measurement, candidate: Measurement) -> Measurement:
    return candidate if candidate.time_us > current.time_us else current


def run_worst_case(
    sizes: Iterable[int] = DEFAULT_SIZES,
    runs: int = WORST_RUNS,
    rng: random.Random | None = None,
) -> list[ResultRow]:
    """Measure each algorithm on its worst-case input for every size.

    Insertion sort gets reversed input; merge sort is averaged over its
    adversarial arrangement; the others keep the slowest random permutation.
    """
    _check_runs(runs)
    if rng is None:
        rng = random.Random()
    rows = []
    for size in sizes:
        insertion = time_insertion(list(range(size, 0, -1)))

        total_time, total_memory = 0.0, 0
        for _ in range(runs):
            m = time_merge(merge_worst_case(size))
            total_time += m.time_us
            total_memory += m.memory_bytes
        merge = Measurement(total_time / runs, int(total_memory / runs))

        quick = heap = composite = _ZERO
        for _ in range(runs):
            data = permutation(size, rng)
            quick = _slower(quick, time_quick(list(data)))
            heap = _slower(heap, time_heap(list(data)))
            composite = _slower(composite, time_composite(list(data)))

        rows.append(ResultRow(size, insertion, quick, merge, heap, composite))
    return rows


def run_average_case(
    sizes: Sequence[int] = DEFAULT_SIZES,
    runs: int = AVERAGE_RUNS,
    rng: random.Random | None = None,
) -> list[ResultRow]:
    """Average each algorithm over ``runs`` random permutations per size.

    Progress is printed every PROGRESS_EVERY runs.
    """
    _check_runs(runs)
    if rng is None:
        rng = random.Random()
    totals = {size: [[0.0, 0] for _ in _TIMERS] for size in sizes}
    for run in range(runs):
        if run % PROGRESS_EVERY == 0:
            print(f"Run {run + 1} of {runs}", flush=True)
        for size in sizes:
            data = permutation(size, rng)
            for acc, timer in zip(totals[size], _TIMERS):
                m = timer(list(data))
                acc[0] += m.time_us
                acc[1] += m.memory_bytes
    return [
        ResultRow(
            size,
            *(Measurement(t / runs, mem // runs) for t, mem in totals[size]),
        )
        for size in sizes
    ]


def write_csv(path: str | os.PathLike[str], rows: Iterable[ResultRow]) -> None:
    """Write the header and one line per row to ``path``."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow(row.csv_fields())