"""Expansions of the square root of two whose numerator has more digits."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterator


def expansions(count: int) -> Iterator[tuple[int, int]]:
    """Yield the first ``count`` expansions of sqrt(2) as (numerator, denominator).

    The first expansion is 1 + 1/2 = 3/2.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    numerator, denominator = 3, 2
    for _ in range(count):
        yield numerator, denominator
        numerator, denominator = numerator + 2 * denominator, numerator + denominator


def count_longer_numerators(count: int = 1000) -> int:
    """Return how many of the first ``count`` expansions have a longer numerator."""
    return sum(
        len(str(numerator)) > len(str(denominator))
        for numerator, denominator in expansions(count)
    )


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=1000)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = count_longer_numerators(args.count)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0