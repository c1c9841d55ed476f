import random

import pytest

from sortbench.benchmark import (
    CSV_HEADER,
    ResultRow,
    run_average_case,
    run_worst_case,
    write_csv,
)
from sortbench.measure import Measurement


def _all_nonnegative(row):
    return all(m.time_us >= 0 and m.memory_bytes >= 0 for m in row.measurements)


def test_worst_case_rows_follow_sizes():
    rows = run_worst_case([5, 20, 80], runs=2, rng=random.Random(1))
    assert [r.size for r in rows] == [5, 20, 80]
    assert all(_all_nonnegative(r) for r in rows)


def test_worst_case_merge_memory_positive():
    rows = run_worst_case([16], runs=3, rng=random.Random(2))
    assert rows[0].merge.memory_bytes > 0


def test_worst_case_rejects_zero_runs():
    with pytest.raises(ValueError):
        run_worst_case([4], runs=0)


def test_average_case_rows_follow_sizes():
    rows = run_average_case([3, 30], runs=3, rng=random.Random(4))
    assert [r.size for r in rows] == [3, 30]
    assert all(_all_nonnegative(r) for r in rows)


def test_average_case_many_runs_single_row():
    rows = run_average_case([3], runs=20, rng=random.Random(0))
    assert [r.size for r in rows] == [3]
    assert _all_nonnegative(rows[0])


def test_average_case_rejects_zero_runs():
    with pytest.raises(ValueError):
        run_average_case([4], runs=0)


def test_write_csv_header_and_rows(tmp_path):
    path = tmp_path / "out.csv"
    rows = run_average_case([4, 8], runs=1, rng=random.Random(9))
    write_csv(path, rows)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == (
        "Size,Insertion_Time(ms),Insertion_Memory(KB),Quick_Time(ms),Quick_Memory(KB),"
        "Merge_Time(ms),Merge_Memory(KB),Heap_Time(ms),Heap_Memory(KB),"
        "Composite_Time(ms),Composite_Memory(KB)"
    )
    assert len(lines) == 3
    assert [line.split(",")[0] for line in lines[1:]] == ["4", "8"]
    assert all(len(line.split(",")) == len(CSV_HEADER) for line in lines)


def test_row_units_converted(tmp_path):
    m = Measurement(1000.0, 1024)
    row = ResultRow(7, m, m, m, m, m)
    path = tmp_path / "row.csv"
    write_csv(path, [row])
    assert path.read_text(encoding="utf-8").splitlines()[1] == "7" + ",1" * 10