"""Smallest set of five primes any two of which concatenate to primes."""

from __future__ import annotations

import argparse
import itertools
import time
from collections.abc import Callable, Sequence

from eulerworks.problem058 import is_prime as _probable_prime

_SET_SIZE = 5


def is_prime(num: int) -> bool:
    """Return True if ``num`` is prime."""
    return _probable_prime(num)


def concatenates(a: int, b: int) -> bool:
    """Return True if both ``ab`` and ``ba`` written side by side are prime."""
    if a < 0 or b < 0:
        raise ValueError(f"numbers must not be negative, got {a} and {b}")
    return is_prime(int(f"{a}{b}")) and is_prime(int(f"{b}{a}"))


def _first_primes(count: int) -> list[int]:
    return list(itertools.islice(filter(is_prime, itertools.count(2)), count))


def _search(
    candidates: Sequence[int],
    chosen: tuple[int, ...],
    needed: int,
    pairs: Callable[[int, int], bool],
) -> tuple[int, ...] | None:
    for prime in candidates:
        compatible = [q for q in candidates if q < prime and pairs(prime, q)]
        if len(compatible) > needed:
            if needed == 0:
                return chosen + (prime, compatible[0])
            found = _search(compatible, chosen + (prime,), needed - 1, pairs)
            if found is not None:
                return found
    return None


def prime_pair_set(max_primes: int = 1500) -> tuple[int, ...]:
    """Return, in ascending order, the five primes found among the first ``max_primes``.

    Primes are tried in ascending order as the largest member of the set.
    """
    if max_primes < 1:
        raise ValueError(f"max_primes must be positive, got {max_primes}")
    primes = _first_primes(max_primes)
    cache: dict[tuple[int, int], bool] = {}

    def pairs(a: int, b: int) -> bool:
        key = (a, b)
        if key not in cache:
            cache[key] = concatenates(a, b)
        return cache[key]

    found = _search(primes, (), _SET_SIZE - 2, pairs)
    if found is None:
        raise ValueError(f"no set of {_SET_SIZE} primes among the first {max_primes}")
    return tuple(sorted(found))


def main(argv: list[str] | None = None) -> int:
    """Print the set found, its sum and the time it took."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--max-primes", type=int, default=1500)
    args = parser.parse_args(argv)
    begin = time.perf_counter()
    members = prime_pair_set(args.max_primes)
    elapsed = time.perf_counter() - begin
    print(" ".join(str(member) for member in members))
    print(f"answer = {sum(members)} runtime = {elapsed:f}")
    return 0