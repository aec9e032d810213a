"""Smallest number evenly divisible by every number from 1 to a limit."""

from __future__ import annotations

import argparse
import time
from functools import reduce


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    while a and b:
        if a >= b:
            a %= b
        else:
            b %= a
    return max(a, b)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two non-negative integers."""
    return a * b // gcd(a, b)


def smallest_multiple(limit: int) -> int:
    """Return the smallest positive number divisible by all of 1..limit."""
    return reduce(lcm, range(2, limit + 1), 1)


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=20)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = smallest_multiple(args.limit)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0