"""Prime below a limit that is the sum of the most consecutive primes."""

from __future__ import annotations

import argparse
import math
import time


def _prime_flags(limit: int) -> bytearray:
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return flags


def consecutive_prime_sum(limit: int) -> int:
    """Return the prime below ``limit`` written as the longest sum of consecutive primes.

    Runs start at one of the primes below 10.
    """
    if limit < 3:
        raise ValueError(f"limit must be at least 3, got {limit}")
    is_prime = _prime_flags(limit)
    primes = [n for n, flag in enumerate(is_prime) if flag]
    best_sum = 0
    best_count = 0
    for start, first in enumerate(primes):
        if first >= 10:
            break
        total = 0
        for count, prime in enumerate(primes[start:], start=1):
            if total + prime >= limit:
                break
            total += prime
            if is_prime[total] and count > best_count:
                best_sum = total
                best_count = count
    return best_sum


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=1000000)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = consecutive_prime_sum(args.limit)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0