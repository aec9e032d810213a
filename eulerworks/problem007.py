"""The n-th prime number."""

from __future__ import annotations

import argparse
import math
import time


def _sieve(limit: int) -> list[int]:
    """Return all primes below ``limit``."""
    if limit < 3:
        return []
    composite = bytearray(limit)
    composite[0] = composite[1] = 1
    for p in range(2, math.isqrt(limit - 1) + 1):
        if not composite[p]:
            composite[p * p :: p] = b"\x01" * len(range(p * p, limit, p))
    return [n for n, flag in enumerate(composite) if not flag]


def nth_prime(n: int) -> int:
    """Return the n-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n < 6:
        limit = 15
    else:
        limit = int(n * (math.log(n) + math.log(math.log(n)))) + 1
    while True:
        primes = _sieve(limit)
        if len(primes) >= n:
            return primes[n - 1]
        limit *= 2


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=10001)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = nth_prime(args.count)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0