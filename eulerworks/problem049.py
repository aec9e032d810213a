"""Arithmetic sequences of four-digit primes that are permutations of one another."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Iterator, Sequence

_FACTORIALS = (6, 2, 1, 1)


def nth_permutation(number: int, index: int) -> int:
    """Return permutation ``index`` (0..23) of the four digits of ``number``.

    Permutations are numbered in lexicographic order of digit positions;
    leading zeros count as digits.
    """
    if not 0 <= number <= 9999:
        raise ValueError(f"number must have at most four digits, got {number}")
    if not 0 <= index < 24:
        raise ValueError(f"index must be in 0..23, got {index}")
    digits = [int(ch) for ch in f"{number:04d}"]
    result = 0
    for factorial in _FACTORIALS:
        position, index = divmod(index, factorial)
        result = result * 10 + digits.pop(position)
    return result


def find_arithmetic_triple(values: Sequence[int]) -> tuple[int, int, int] | None:
    """Return the first three sorted values with equal gaps, or None."""
    later = set()
    ordered = sorted(values)
    for first_pos, first in enumerate(ordered):
        later = set(ordered[first_pos + 1 :])
        for middle in ordered[first_pos + 1 :]:
            third = 2 * middle - first
            if third != middle and third in later:
                return first, middle, third
    return None


def _prime_flags(limit: int) -> bytearray:
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return flags


def _triples() -> Iterator[tuple[int, int, int]]:
    is_prime = _prime_flags(10000)
    used: set[int] = set()
    for num in range(1001, 10000):
        if not is_prime[num]:
            continue
        group = []
        for index in range(24):
            candidate = nth_permutation(num, index)
            if candidate > 999 and is_prime[candidate] and candidate not in used:
                used.add(candidate)
                group.append(candidate)
        triple = find_arithmetic_triple(group)
        if triple is not None:
            yield triple


def prime_permutation_concatenation() -> int:
    """Return the 12-digit number formed by the second such prime sequence."""
    triples = _triples()
    next(triples)
    try:
        triple = next(triples)
    except StopIteration:
        raise ValueError("no second prime permutation sequence exists") from None
    return int("".join(str(value) for value in triple))


def main(argv: list[str] | None = None) -> int:
    """Print the answer and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    begin = time.perf_counter()
    answer = prime_permutation_concatenation()
    elapsed = time.perf_counter() - begin
    print(f"answer: {answer}")
    print(f"runtime = {elapsed:f}")
    return 0