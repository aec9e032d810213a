import math

import pytest

from eulerworks.problem051 import (
    apply_mask,
    family,
    replacement_masks,
    smallest_family_prime,
)


def _prime(n):
    return n > 1 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_replacement_masks_cover_all_nonzero_masks():
    masks = replacement_masks(5)
    assert masks == list(range(1, 32))
    assert len(set(masks)) == 31


def test_replacement_masks_rejects_zero_length():
    with pytest.raises(ValueError):
        replacement_masks(0)


def test_apply_mask_example():
    assert apply_mask(5, 123, 7, 4) == 44123


def test_apply_mask_all_fill_when_mask_empty():
    assert apply_mask(3, 12, 0, 7) == 777


def test_apply_mask_pads_with_zeros():
    # mask 7 wants three digits but 12 supplies only two
    assert apply_mask(5, 12, 7, 4) == 44012


def test_apply_mask_rejects_bad_fill():
    with pytest.raises(ValueError):
        apply_mask(5, 12, 3, 10)


def test_apply_mask_rejects_negative_number():
    with pytest.raises(ValueError):
        apply_mask(5, -1, 3, 1)


def test_family_members_are_full_length_primes():
    members = family(233, 10, 5)
    assert len(members) == 8
    assert all(_prime(m) for m in members)
    assert all(100000 <= m < 1000000 for m in members)
    assert all(m % 10 == 3 for m in members)
    assert members == sorted(members)


def test_smallest_family_prime_for_eight():
    answer = smallest_family_prime(8)
    assert answer == 121313
    assert answer == family(233, 10, 5)[0]


def test_smallest_family_prime_rejects_bad_size():
    with pytest.raises(ValueError):
        smallest_family_prime(11)