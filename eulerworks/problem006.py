"""Difference between the square of the sum and the sum of the squares."""

from __future__ import annotations

import argparse
import time


def sum_square_difference(n: int) -> int:
    """Return (1 + ... + n)^2 - (1^2 + ... + n^2) using closed forms."""
    sum_num = (n * n + n) // 2
    sum_sq = n * (n + 1) * (2 * n + 1) // 6
    return sum_num * sum_num - sum_sq


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-n", type=int, default=100)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = sum_square_difference(args.n)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0