import pytest

from eulerworks.problem048 import main, self_power_tail, self_powers_sum


def test_worked_example_full_value():
    assert self_powers_sum(10, 11) == 10405071317


def test_worked_example_truncated():
    assert self_powers_sum(10) == 10405071317 % 10**10


def test_small_tail():
    assert self_power_tail(3) == 27


@pytest.mark.parametrize("num", [1, 2, 7, 50, 999, 1000])
@pytest.mark.parametrize("digits", [1, 5, 10])
def test_tail_is_suffix_of_full_power(num, digits):
    tail = self_power_tail(num, digits)
    assert 0 <= tail < 10**digits
    assert (num**num - tail) % 10**digits == 0


def test_power_of_ten_tail_is_zero():
    assert self_power_tail(10, 10) == 0


def test_sum_limit_1000():
    assert self_powers_sum(1000) == 9110846700


def test_sum_is_consistent_across_digit_counts():
    assert self_powers_sum(1000, 12) % 10**10 == self_powers_sum(1000, 10)


@pytest.mark.parametrize("digits", [0, -2])
def test_invalid_digits(digits):
    with pytest.raises(ValueError):
        self_power_tail(5, digits)
    with pytest.raises(ValueError):
        self_powers_sum(5, digits)


def test_main_prints_answer(capsys):
    assert main(["--limit", "10", "--digits", "11"]) == 0
    assert capsys.readouterr().out.startswith("answer = 10405071317 ")