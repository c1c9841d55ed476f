# sortbench

sortbench times five sorting algorithms on integer lists of several sizes and
estimates the memory each one uses. The algorithms are insertion sort,
quicksort, merge sort, heap sort and a composite sort that combines insertion
sort with quicksort. The results are written to CSV files.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the benchmark

```
sortbench
```

Without arguments the command asks which analysis to run:

1. Worst case analysis: writes `sorting_worstcase.csv`
2. Average case analysis: writes `sorting_averagecase.csv`
3. Both

Any other answer runs nothing. The choice can also be passed directly, for
example `sortbench 3`. Other options:

- `--sizes 500,1000` sets the input sizes, given as a comma-separated list. The default is 500,1000,2000,3000,4000,5000.
- `--worst-runs N` sets the number of runs in the worst case analysis. The default is 100.
- `--average-runs N` sets the number of runs in the average case analysis. The default is 1000.
- `--output-dir DIR` sets the directory the CSV files are written to. The default is the current directory.

The worst case analysis uses these inputs:

- Insertion sort sorts a list in descending order once.
- Merge sort sorts an adversarial arrangement of 1..n. The result is averaged over the runs.
- Quicksort, heap sort and composite sort each sort a fresh random permutation on every run, and the slowest run is kept.

The average case analysis gives all five algorithms a copy of the same random
permutation on every run and averages the results. It prints a progress line
every 10 runs.

Each CSV row holds the size, then a time in milliseconds and a memory figure in
kilobytes for each algorithm, in the order insertion, quick, merge, heap and
composite.

Memory figures come from the growth in the process's private memory, or in its
resident size where private memory is not reported. When no growth is measured,
quicksort and composite sort fall back to an estimate based on their partition
depth, and merge sort falls back to the size of its scratch buffer.

## Using the library

```python
import random

from sortbench.heap import heap_sort
from sortbench.generators import permutation, merge_worst_case
from sortbench.measure import time_merge
from sortbench.benchmark import run_average_case, write_csv

data = permutation(10, random.Random(1))
heap_sort(data)                  # sorts the list in place
print(merge_worst_case(4))       # [4, 2, 3, 1]

measurement = time_merge(merge_worst_case(1000))
print(measurement.time_us, measurement.memory_bytes)

rows = run_average_case([100, 200], runs=5, rng=random.Random(0))
write_csv("averages.csv", rows)
```

These functions sort a mutable sequence in place:

- `sortbench.insertion.insertion_sort`
- `sortbench.quick.quick_sort`, which uses median-of-three partitioning
- `sortbench.quick.tail_quick_sort`, which recurses on the smaller side of each partition
- `sortbench.merge.merge_sort`, a bottom-up merge sort
- `sortbench.heap.heap_sort`
- `sortbench.composite.composite_sort`

The quicksort functions and `composite_sort` return the deepest partition level
they reached.

The `time_*` functions in `sortbench.measure` sort the sequence they are given
in place and return a `Measurement`. It holds `time_us`, the elapsed time in
whole microseconds, and `memory_bytes`, the memory estimate. `run_worst_case`
and `run_average_case` in `sortbench.benchmark` return one `ResultRow` per size,
and `write_csv` writes those rows to a file.

## A small extra

`sortbench-sigma` prints the sum 1 + 2 + 3. You can also call
`sortbench.sigma.sigma(n)` to get 1 + 2 + ... + n. It raises `ValueError` when
n is negative.