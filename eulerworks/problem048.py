"""Last digits of the series 1^1 + 2^2 + ... + n^n."""

from __future__ import annotations

import argparse
import time


def self_power_tail(num: int, digits: int = 10) -> int:
    """Return the last ``digits`` digits of num^num."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    if num == 0:
        return 0
    return pow(num, num, 10**digits)


def self_powers_sum(limit: int, digits: int = 10) -> int:
    """Return the last ``digits`` digits of the sum of k^k for k in 1..limit."""
    modulus = 10**digits if digits >= 1 else 0
    total = sum(self_power_tail(k, digits) for k in range(1, limit + 1))
    if modulus == 0:
        raise ValueError(f"digits must be positive, got {digits}")
    return total % modulus


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=1000)
    parser.add_argument("--digits", type=int, default=10)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = self_powers_sum(args.limit, args.digits)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer}   runtime = {elapsed:f}")
    return 0