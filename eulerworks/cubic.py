"""Rational roots of cubic equations A*x^3 + B*x^2 + C*x + D = 0."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from fractions import Fraction

_SCALE = 1000
_NAMES = ("A", "B", "C", "D")


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers, signs ignored."""
    return math.gcd(a, b)


def divisors(num: int) -> list[int]:
    """Return the positive divisors of ``num`` in ascending order.

    For zero only the unit is returned.
    """
    n = abs(num)
    if n == 0:
        return [1]
    found: set[int] = set()
    for div in range(1, math.isqrt(n) + 1):
        if n % div == 0:
            found.update((div, n // div))
    return sorted(found)


def is_root(coeffs: Sequence[int], numerator: int, denominator: int) -> bool:
    """Return True if numerator/denominator is a root of the cubic with ``coeffs``."""
    if len(coeffs) != 4:
        raise ValueError(f"a cubic needs four coefficients, got {len(coeffs)}")
    if denominator == 0:
        raise ValueError("denominator must not be zero")
    a, b, c, d = coeffs
    p, q = numerator, denominator
    return a * p**3 + b * p**2 * q + c * p * q**2 + d * q**3 == 0


def _scaled(value: float) -> int:
    scaled = value * _SCALE
    magnitude = math.floor(abs(scaled) + 0.5)
    return magnitude if scaled >= 0 else -magnitude


def rational_roots(a: float, b: float, c: float, d: float) -> list[Fraction]:
    """Return the distinct rational roots found, in the order they are found.

    Coefficients are rounded to three decimals. Candidates are zero and
    plus or minus a divisor of D over a divisor of A.
    """
    coeffs = [_scaled(value) for value in (a, b, c, d)]
    common = 0
    for value in coeffs:
        common = gcd(common, value)
    if common == 0:
        raise ValueError("all coefficients are zero")
    coeffs = [value // common for value in coeffs]

    roots: list[Fraction] = []

    def record(numerator: int, denominator: int) -> None:
        root = Fraction(numerator, denominator)
        if root not in roots:
            roots.append(root)

    if is_root(coeffs, 0, 1):
        record(0, 1)
    for numerator in divisors(coeffs[3]):
        for denominator in divisors(coeffs[0]):
            for signed in (numerator, -numerator):
                if is_root(coeffs, signed, denominator):
                    record(signed, denominator)
    return roots


def main(argv: list[str] | None = None) -> int:
    """Read the coefficients and print the rational roots found."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("coefficients", nargs="*", type=float, metavar="A B C D")
    args = parser.parse_args(argv)
    values = args.coefficients
    if not values:
        print("Input coefficients the math equation: A*x^3 + B*x^2 + C*x + D = 0")
        values = [float(input(f"{name}: ")) for name in _NAMES]
    elif len(values) != 4:
        parser.error("expected four coefficients A B C D")
    try:
        roots = rational_roots(*values)
    except ValueError as error:
        print(error)
        return 1
    if not roots:
        print("No answers")
        return 0
    print("Answers:")
    for index, root in enumerate(roots, start=1):
        print(f"x{index} = {root.numerator}/{root.denominator}")
    return 0