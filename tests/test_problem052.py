from collections import Counter

import pytest

from eulerworks.problem052 import digit_counts, permuted_multiples


def test_digit_counts_example_pair():
    assert digit_counts(125874) == digit_counts(251748)


def test_digit_counts_counts_repeats():
    assert digit_counts(1122) == Counter({1: 2, 2: 2})


def test_digit_counts_total_equals_length():
    assert sum(digit_counts(9081726354).values()) == 10


def test_digit_counts_of_zero_is_empty():
    assert digit_counts(0) == Counter()


def test_digit_counts_rejects_negative():
    with pytest.raises(ValueError):
        digit_counts(-5)


def test_permuted_multiples():
    x = permuted_multiples()
    assert x == 142857
    for k in range(2, 6):
        assert digit_counts(k * x) == digit_counts(x)