"""Command line entry point for the sorting benchmark."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Sequence

from sortbench.benchmark import (
    AVERAGE_RUNS,
    DEFAULT_SIZES,
    WORST_RUNS,
    run_average_case,
    run_worst_case,
    write_csv,
)

WORST_FILE = "sorting_worstcase.csv"
AVERAGE_FILE = "sorting_averagecase.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_choice(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _sizes(text: str) -> list[int]:
    try:
        sizes = [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size list: {text!r}") from exc
    if not sizes or any(size < 0 for size in sizes):
        raise argparse.ArgumentTypeError(f"invalid size list: {text!r}")
    return sizes


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Benchmark sorting algorithms."
    )
    parser.add_argument(
        "choice", nargs="?", help="1: worst case, 2: average case, 3: both"
    )
    parser.add_argument("--sizes", type=_sizes, default=list(DEFAULT_SIZES))
    parser.add_argument("--worst-runs", type=int, default=WORST_RUNS)
    parser.add_argument("--average-runs", type=int, default=AVERAGE_RUNS)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen analyses and write their CSV files."""
    args = _parser().parse_args(argv)
    if args.choice is None:
        print("Choose test mode:")
        print("1. Worst case analysis")
        print("2. Average case analysis")
        print("3. Both")
        sys.stdout.write("Enter choice (1-3): ")
        sys.stdout.flush()
        choice = _parse_choice(sys.stdin.readline())
    else:
        choice = _parse_choice(args.choice)

    if choice in (1, 3):
        print("Beginning worst case analysis...")
        rows = run_worst_case(args.sizes, args.worst_runs)
        write_csv(args.output_dir / WORST_FILE, rows)
        print(f"Worst case results saved to {WORST_FILE}")

    if choice in (2, 3):
        print("Beginning average case analysis...")
        rows = run_average_case(args.sizes, args.average_runs)
        write_csv(args.output_dir / AVERAGE_FILE, rows)
        print(f"Average case results saved to {AVERAGE_FILE}")

    print("All tests completed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())