"""Count binomial coefficients nCr above a threshold."""

from __future__ import annotations

import argparse
import math
import time


def combinations_exceed(n: int, r: int, threshold: int = 1_000_000) -> bool:
    """Return True if nCr is strictly greater than ``threshold``."""
    if n < 0 or r < 0:
        raise ValueError(f"n and r must not be negative, got n={n}, r={r}")
    if r > n:
        raise ValueError(f"r must not exceed n, got n={n}, r={r}")
    return math.comb(n, r) > threshold


def count_large_combinations(limit_n: int = 100, threshold: int = 1_000_000) -> int:
    """Return how many nCr with 1 <= r < n <= limit_n exceed ``threshold``."""
    if limit_n < 0:
        raise ValueError(f"limit_n must not be negative, got {limit_n}")
    return sum(
        combinations_exceed(n, r, threshold)
        for r in range(1, limit_n + 1)
        for n in range(r + 1, limit_n + 1)
    )


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--threshold", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = count_large_combinations(args.limit, args.threshold)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0