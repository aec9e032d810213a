"""Side length of the number spiral at which diagonal primes drop below ten percent."""

from __future__ import annotations

import argparse
import time

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(num: int) -> bool:
    """Return True if ``num`` is prime (exact for every num below 3.3e24)."""
    if num < 2:
        return False
    for p in _BASES:
        if num % p == 0:
            return num == p
    d, s = num - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _BASES:
        x = pow(a, d, num)
        if x in (1, num - 1):
            continue
        for _ in range(s - 1):
            x = x * x % num
            if x == num - 1:
                break
        else:
            return False
    return True


def spiral_side_length() -> int:
    """Return the first side length at which under 10% of diagonal numbers are prime."""
    step = 0
    primes = 0
    total = 1
    corner = 1
    while primes == 0 or primes * 10 >= total:
        step += 2
        for _ in range(3):
            corner += step
            if is_prime(corner):
                primes += 1
        corner += step
        total += 4
    return step + 1


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    begin = time.perf_counter()
    answer = spiral_side_length()
    elapsed = time.perf_counter() - begin
    print(f"answer = {answer} runtime = {elapsed:f}")
    return 0