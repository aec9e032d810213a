import pytest

from eulerworks.problem047 import count_distinct_prime_factors, first_consecutive, main


@pytest.mark.parametrize(
    "num, expected",
    [(14, 2), (15, 2), (644, 3), (645, 3), (646, 3), (1, 0), (2, 1), (7, 1)],
)
def test_count_distinct_prime_factors(num, expected):
    assert count_distinct_prime_factors(num) == expected


@pytest.mark.parametrize("bad", [0, -5])
def test_count_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        count_distinct_prime_factors(bad)


def test_first_consecutive_pair():
    assert first_consecutive(2) == 14


def test_first_consecutive_triple():
    assert first_consecutive(3) == 644


def test_first_consecutive_four():
    start = first_consecutive(4)
    assert start == 134043
    assert all(count_distinct_prime_factors(start + k) == 4 for k in range(4))


def test_first_consecutive_is_first():
    start = first_consecutive(3)
    earlier = [
        n
        for n in range(2, start)
        if all(count_distinct_prime_factors(n + k) == 3 for k in range(3))
    ]
    assert earlier == []
    assert all(count_distinct_prime_factors(start + k) == 3 for k in range(3))


def test_first_consecutive_rejects_zero():
    with pytest.raises(ValueError):
        first_consecutive(0)


def test_main_prints_answer(capsys):
    assert main(["--count", "3"]) == 0
    assert "answer = 644" in capsys.readouterr().out