"""Maximum digit sum of a^b for a, b below a limit."""

from __future__ import annotations

import argparse
import time


def digit_sum(num: int) -> int:
    """Return the sum of the decimal digits of ``num``."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    return sum(int(ch) for ch in str(num))


def _best(limit: int) -> tuple[int, int, int]:
    if limit < 3:
        raise ValueError(f"limit must be at least 3, got {limit}")
    best = (0, 0, 0)
    for base in range(1, limit):
        value = base
        for exponent in range(2, limit):
            value *= base
            total = digit_sum(value)
            if total > best[0]:
                best = (total, base, exponent)
    return best


def max_digit_sum(limit: int = 100) -> int:
    """Return the largest digit sum of a^b for 1 <= a < limit and 2 <= b < limit."""
    return _best(limit)[0]


def main(argv: list[str] | None = None) -> int:
    """Print the answer, the power giving it and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=100)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer, base, exponent = _best(args.limit)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} ({base}^{exponent}) runtime = {elapsed:f}")
    return 0