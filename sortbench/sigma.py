"""Sum of the integers from 1 to n."""

from __future__ import annotations

import sys
from typing import Sequence


def sigma(n: int) -> int:
    """Return 1 + 2 + ... + n; raise ValueError for negative n."""
    if n < 0:
        raise ValueError("n < 0")
    if n <= 1:
        return n
    return n * (n + 1) // 2


def main(argv: Sequence[str] | None = None) -> int:
    """Print sigma(3) and exit successfully."""
    del argv
    sys.stdout.write(f"{sigma(3)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())