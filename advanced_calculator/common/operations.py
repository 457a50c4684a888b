"""Arithmetic functions and the read-only table dispatching operators to them."""
from collections.abc import Callable as ABCCallable
import math
import operator
from types import MappingProxyType
from typing import Callable, Mapping, Union

# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def power(base: float, exponent: float) -> float:
    """
    Raise ``base`` to ``exponent`` with IEEE-754 results instead of exceptions.

    Overflow gives a signed infinity, ``0`` to a negative power gives ``inf`` and a
    negative base with a fractional exponent gives ``nan``.

    :param float base: Base
    :param float exponent: Exponent

    :return: ``base ** exponent``
    :rtype: float
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and abs(math.fmod(exponent, 2)) == 1
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


def root(base: float, degree: float) -> float:
    """
    Return the ``degree``-th root of ``base``, computed as ``base ** (1 / degree)``.

    A degree of zero is the limit of ``1 / degree``: an infinite exponent with the
    sign of the degree.
    """
    if degree == 0:
        return power(base, math.copysign(math.inf, degree))
    return power(base, 1.0 / degree)


def modulus(dividend: Union[int, float], divisor: Union[int, float]) -> float:
    """
    Remainder of the truncated operands, signed like the dividend.

    Integer operands are used as they are, so values above 2 ** 53 keep every digit.
    """
    dividend, divisor = math.trunc(dividend), math.trunc(divisor)
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


def factorial(value: float, _unused: float = 0.0) -> float:
    """
    Return ``value!`` through the identity ``n! = gamma(n + 1)``.

    Zero and negative values give 1. Non-integer values are accepted.
    """
    if value <= 0:
        return 1.0
    try:
        return math.gamma(value + 1)
    except OverflowError:
        return math.inf


OPERATIONS: Mapping[str, OperatorFn] = MappingProxyType({
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": modulus,
    "^": power,
    "$": root,
    "!": factorial,
})
