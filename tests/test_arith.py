import pytest

from securetally.crypto.arith import l_function, lcm, mod_inverse, mod_pow
from securetally.errors import NoInverseExists


def test_mod_pow_matches_builtin():
    assert mod_pow(4, 13, 497) == 445
    assert mod_pow(7, 0, 13) == 1
    assert mod_pow(5, 3, 1) == 0


@pytest.mark.parametrize("modulus", [0, -7])
def test_mod_pow_rejects_non_positive_modulus(modulus):
    with pytest.raises(ValueError):
        mod_pow(2, 3, modulus)


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)


def test_mod_inverse():
    assert mod_inverse(3, 7) == 5
    assert (mod_inverse(17, 3120) * 17) % 3120 == 1


def test_mod_inverse_without_inverse():
    with pytest.raises(NoInverseExists):
        mod_inverse(6, 9)


def test_no_inverse_is_an_arithmetic_error():
    with pytest.raises(ArithmeticError):
        mod_inverse(0, 5)


def test_l_function():
    n = 11
    assert l_function(1 + 7 * n, n) == 7
    assert l_function(1, n) == 0


def test_lcm():
    assert lcm(4, 6) == 12
    assert lcm(10, 12) == 60
    assert lcm(7, 7) == 7
    assert lcm(0, 5) == 0
