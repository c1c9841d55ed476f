"""Sorting algorithms with worst-case and average-case timing benchmarks."""

__version__ = "0.1.0"
__all__ = [
    "sigma",
    "insertion",
    "heap",
    "merge",
    "quick",
    "composite",
    "generators",
    "measure",
    "benchmark",
    "cli",
]