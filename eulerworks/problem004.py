"""Largest palindrome made from the product of two three-digit numbers."""

from __future__ import annotations

import argparse
import time


def is_palindrome(num: int) -> bool:
    """Return True if the decimal digits of ``num`` read the same both ways."""
    digits = str(num)
    return digits == digits[::-1]


def largest_palindrome_product() -> int:
    """Return the largest palindrome that is a product of two three-digit numbers.

    Every palindrome with an even number of digits is divisible by 11, so one
    factor only runs over multiples of 11.
    """
    best = 0
    for i in range(999, 99, -1):
        for j in range(990, 99, -11):
            product = i * j
            if best > product:
                break
            if is_palindrome(product):
                best = product
                break
    return best


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    begin = time.perf_counter()
    answer = largest_palindrome_product()
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0