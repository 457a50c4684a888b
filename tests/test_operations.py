"""Test the operator dispatch table and its arithmetic functions."""
import math

import pytest

from advanced_calculator.common.operations import OPERATIONS, factorial, modulus, power, root


def test_operations_cover_every_operator() -> None:
    """Every operator character has a function."""
    assert set(OPERATIONS) == set("+-*/%^$!")


def test_operations_table_is_read_only() -> None:
    """The dispatch table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        OPERATIONS["+"] = lambda a, b: 0.0


@pytest.mark.parametrize("op,left,right,expected", [
    ("+", 2.0, 3.0, 5.0),
    ("-", 2.0, 3.0, -1.0),
    ("*", 2.5, 4.0, 10.0),
    ("/", 7.0, 2.0, 3.5),
    ("%", 7.0, 3.0, 1.0),
    ("^", 2.0, 10.0, 1024.0),
    ("$", 9.0, 2.0, 3.0),
    ("!", 4.0, 0.0, 24.0),
])
def test_dispatch(op, left, right, expected) -> None:
    """Each operator dispatches to the matching function."""
    assert OPERATIONS[op](left, right) == pytest.approx(expected)


@pytest.mark.parametrize("dividend,divisor,expected", [
    (7.0, 3.0, 1.0),
    (-7.0, 3.0, -1.0),  # sign follows the dividend
    (7.0, -3.0, 1.0),
    (6.0, 3.0, 0.0),
])
def test_modulus(dividend, divisor, expected) -> None:
    """modulus truncates towards zero like integer division."""
    assert modulus(dividend, divisor) == expected


def test_power_overflow_is_infinite() -> None:
    """Overflowing powers return a signed infinity."""
    assert power(10.0, 400.0) == math.inf
    assert power(-10.0, 401.0) == -math.inf
    assert power(-10.0, 400.0) == math.inf


def test_power_undefined_values() -> None:
    """Negative bases with fractional exponents give nan, zero to a negative power gives inf."""
    assert math.isnan(power(-8.0, 0.5))
    assert power(0.0, -1.0) == math.inf


def test_root() -> None:
    """root computes base ** (1 / degree)."""
    assert root(27.0, 3.0) == pytest.approx(3.0)
    assert root(16.0, -2.0) == pytest.approx(0.25)


def test_root_of_degree_zero() -> None:
    """A zero degree behaves like an infinite exponent."""
    assert root(4.0, 0.0) == math.inf
    assert root(0.5, 0.0) == 0.0
    assert root(4.0, -0.0) == 0.0


@pytest.mark.parametrize("value,expected", [
    (0.0, 1.0),
    (-3.0, 1.0),
    (-0.5, 1.0),
    (1.0, 1.0),
    (5.0, 120.0),
    (10.0, 3628800.0),
    (2.5, 3.3233509704478426),
])
def test_factorial(value, expected) -> None:
    """factorial uses gamma(n + 1) and returns 1 for non-positive values."""
    assert factorial(value) == pytest.approx(expected)


def test_factorial_overflow_is_infinite() -> None:
    """Factorials past the float range return inf."""
    assert factorial(170.0) < math.inf
    assert factorial(171.0) == math.inf


def test_modulus_of_exact_integers() -> None:
    """Integer operands are not rounded through float."""
    assert modulus(12345678901234567891, 10) == 1.0
    assert modulus(-12345678901234567891, 10) == -1.0
