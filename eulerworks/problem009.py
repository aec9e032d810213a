"""Pythagorean triplet whose members add up to a given total."""

from __future__ import annotations

import argparse
import time


def special_pythagorean_triplet(total: int) -> tuple[int, int, int]:
    """Return (a, b, c) with a <= b, a^2 + b^2 = c^2 and a + b + c = total.

    The largest ``c`` is tried first. Raises ValueError if no triplet exists.
    """
    for c in range(total // 2, 0, -1):
        a_and_b = total - c
        for b in range(a_and_b - 1, 0, -1):
            a = a_and_b - b
            if a > b:
                break
            if a * a + b * b == c * c:
                return a, b, c
    raise ValueError(f"no Pythagorean triplet sums to {total}")


def main(argv: list[str] | None = None) -> int:
    """Print the product of the triplet and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--total", type=int, default=1000)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    a, b, c = special_pythagorean_triplet(args.total)
    elapsed = time.perf_counter() - begin
    print(f"a*b*c = {a * b * c} runtime = {elapsed:f}")
    return 0