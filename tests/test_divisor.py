import sys
import os
from fractions import Fraction
from decimal import Decimal

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import sainte_lague.divisor as d

TEST_ORDERS = list(range(10)) + [100, 1000, 10000]


@pytest.mark.parametrize('order', TEST_ORDERS)
def test_sainte_lague_odd(order):
    divisor = d.sainte_lague(order)
    assert divisor > 0
    assert divisor % 2 == 1
    assert divisor == 2 * order + 1


def test_sainte_lague_sequence():
    assert [d.sainte_lague(i) for i in range(5)] == [1, 3, 5, 7, 9]


def test_modified_first_coef():
    modif = d.modified_first_coef(d.sainte_lague, 8654)
    assert modif(0) == 8654
    for i in TEST_ORDERS[1:]:
        assert modif(i) == d.sainte_lague(i)


@pytest.mark.parametrize('coef', [0.5, Decimal('0.5'), Fraction(1, 2)])
def test_modified_first_coef_exact(coef):
    modif = d.modified_first_coef(d.sainte_lague, coef)
    assert modif(0) == Fraction(1, 2)
    assert isinstance(modif(0), Fraction)


@pytest.mark.parametrize('coef', [0, -1, -0.5])
def test_modified_first_coef_nonpositive(coef):
    with pytest.raises(ValueError):
        d.modified_first_coef(d.sainte_lague, coef)


def test_half_first():
    half = d.half_first()
    assert [half(i) for i in range(4)] == [Fraction(1, 2), 3, 5, 7]


def test_get_divisor_function():
    assert d.get_divisor_function() is d.sainte_lague
    assert d.get_divisor_function(False) is d.sainte_lague
    half = d.get_divisor_function(True)
    assert half(0) == Fraction(1, 2)
    assert half(1) == 3
