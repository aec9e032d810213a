import math

import pytest

from eulerworks.problem058 import is_prime, spiral_side_length


@pytest.mark.parametrize("num", [2, 3, 5, 7, 13, 17, 31, 37, 43])
def test_diagonal_primes(num):
    assert is_prime(num) is True


@pytest.mark.parametrize("num", [0, 1, 9, 21, 25, 49])
def test_non_primes(num):
    assert is_prime(num) is False


def test_is_prime_agrees_with_trial_division():
    for n in range(2000):
        expected = n > 1 and all(n % d for d in range(2, math.isqrt(n) + 1))
        assert is_prime(n) == expected


def test_seven_by_seven_diagonals_have_eight_primes():
    diagonal = [1, 3, 5, 7, 9, 13, 17, 21, 25, 31, 37, 43, 49]
    assert sum(is_prime(n) for n in diagonal) == 8


def test_spiral_side_length():
    side = spiral_side_length()
    assert side == 26241
    assert side % 2 == 1