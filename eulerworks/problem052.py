"""Smallest number whose small multiples contain exactly the same digits."""

from __future__ import annotations

import argparse
import itertools
import time
from collections import Counter


def digit_counts(num: int) -> Counter[int]:
    """Return how many times each decimal digit occurs in ``num`` (empty for zero)."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    if num == 0:
        return Counter()
    return Counter(int(ch) for ch in str(num))


def permuted_multiples() -> int:
    """Return the smallest x such that 2x, 3x, 4x and 5x use the digits of x."""
    for x in itertools.count(1):
        base = digit_counts(x)
        if all(digit_counts(x * k) == base for k in range(2, 6)):
            return x
    raise AssertionError("unreachable")


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    begin = time.perf_counter()
    answer = permuted_multiples()
    elapsed = time.perf_counter() - begin
    print(f"answers = {answer} runtime = {elapsed:f}")
    return 0