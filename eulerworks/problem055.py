"""Count Lychrel numbers below a limit."""

from __future__ import annotations

import argparse
import time


def reverse_and_add(num: int) -> int:
    """Return ``num`` plus the number formed by its digits reversed."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    return num + int(str(num)[::-1])


def is_palindrome(num: int) -> bool:
    """Return True if the decimal digits of ``num`` read the same both ways."""
    digits = str(num)
    return digits == digits[::-1]


def is_lychrel(num: int, iterations: int = 50) -> bool:
    """Return True if no palindrome appears within ``iterations`` reverse-and-add steps.

    The starting number itself is not checked.
    """
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    value = num
    for _ in range(iterations):
        value = reverse_and_add(value)
        if is_palindrome(value):
            return False
    return True


def count_lychrel(limit: int = 10000, iterations: int = 50) -> int:
    """Return how many positive numbers below ``limit`` are Lychrel numbers."""
    return sum(is_lychrel(n, iterations) for n in range(1, limit))


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=10000)
    parser.add_argument("--iterations", type=int, default=50)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    answer = count_lychrel(args.limit, args.iterations)
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0