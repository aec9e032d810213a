"""Smallest prime in an eight-member family formed by replacing digits with one repeated digit."""

from __future__ import annotations

import argparse
import math
import time
from functools import lru_cache

_LENGTH = 5
_START = 101
_FINISH = 1000


@lru_cache(maxsize=None)
def _prime_flags(limit: int) -> bytearray:
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return flags


def replacement_masks(length: int) -> list[int]:
    """Return every placement mask for a number of ``length`` digits.

    Bit k of a mask set means position k (counted from the lowest digit)
    takes a digit of the original number; a clear bit takes the repeated digit.
    """
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    return list(range(1, 1 << length))


def apply_mask(length: int, number: int, mask: int, fill: int) -> int:
    """Spread the digits of ``number`` over the set bits of ``mask``, ``fill`` elsewhere.

    Digits are taken from the lowest upwards; once they run out, zeros are used.
    """
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if not 0 <= fill <= 9:
        raise ValueError(f"fill must be a single digit, got {fill}")
    digits = (int(ch) for ch in reversed(str(number)))
    result = 0
    for position in range(length):
        digit = next(digits, 0) if (mask >> position) & 1 else fill
        result += digit * 10**position
    return result


def family(number: int, mask: int, length: int = _LENGTH) -> list[int]:
    """Return the primes of full length obtained by filling ``mask`` with each digit.

    The last digit of ``number`` stays in place; the rest is placed by ``mask``.
    """
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    flags = _prime_flags(10 ** (length + 1))
    last, head = number % 10, number // 10
    lowest = 10**length
    members = []
    for fill in range(10):
        candidate = last + apply_mask(length, head, mask, fill) * 10
        if candidate >= lowest and flags[candidate]:
            members.append(candidate)
    return members


def _first_family(size: int) -> tuple[int, int, list[int]]:
    masks = replacement_masks(_LENGTH)
    for number in range(_START, _FINISH, 2):
        for mask in masks:
            members = family(number, mask, _LENGTH)
            if len(members) == size:
                return number, mask, members
    raise ValueError(f"no family of exactly {size} primes found")


def smallest_family_prime(size: int = 8) -> int:
    """Return the smallest prime of the first family with exactly ``size`` primes."""
    if not 1 <= size <= 10:
        raise ValueError(f"size must be in 1..10, got {size}")
    return _first_family(size)[2][0]


def main(argv: list[str] | None = None) -> int:
    """Print the members of the family found and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=8)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    _, _, members = _first_family(args.size)
    elapsed = time.perf_counter() - begin
    for member in members:
        print(member)
    print(f"answers = {len(members)} runtime = {elapsed:f}")
    return 0