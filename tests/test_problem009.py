import pytest

from eulerworks.problem009 import main, special_pythagorean_triplet


def test_classic_triplet():
    assert special_pythagorean_triplet(12) == (3, 4, 5)


@pytest.mark.parametrize("total", [12, 24, 30, 60, 1000])
def test_triplet_invariants(total):
    a, b, c = special_pythagorean_triplet(total)
    assert a + b + c == total
    assert a * a + b * b == c * c
    assert 0 < a <= b < c


def test_thousand_product():
    a, b, c = special_pythagorean_triplet(1000)
    assert a * b * c == 31875000


@pytest.mark.parametrize("total", [1, 7, 11, 13, 999])
def test_no_triplet(total):
    with pytest.raises(ValueError):
        special_pythagorean_triplet(total)


def test_main_prints_product(capsys):
    assert main(["--total", "12"]) == 0
    assert capsys.readouterr().out.startswith("a*b*c = 60 ")