"""First run of consecutive integers that each have a given number of distinct prime factors."""

from __future__ import annotations

import argparse
import time


def count_distinct_prime_factors(num: int) -> int:
    """Return how many distinct primes divide ``num``."""
    if num < 1:
        raise ValueError(f"num must be a positive integer, got {num}")
    count = 0
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            count += 1
            while num % divisor == 0:
                num //= divisor
        divisor += 1
    if num > 1:
        count += 1
    return count


def _distinct_factor_table(limit: int) -> list[int]:
    """Return a list whose entry n is the number of distinct primes dividing n."""
    table = [0] * limit
    for p in range(2, limit):
        if table[p] == 0:
            for multiple in range(p, limit, p):
                table[multiple] += 1
    return table


def first_consecutive(count: int) -> int:
    """Return the first of ``count`` consecutive integers with ``count`` distinct prime factors each."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    limit = 1024
    while True:
        table = _distinct_factor_table(limit)
        run = 0
        for n in range(2, limit):
            if table[n] == count:
                run += 1
                if run == count:
                    return n - count + 1
            else:
                run = 0
        limit *= 2


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=4)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = first_consecutive(args.count)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0