"""Domain checks run on binary operations once both operands are known to be numbers."""
from advanced_calculator.common.errors import CalculationError, ErrorCode
from advanced_calculator.common.logger import logger


def check_if_divided_by_zero(operator: str, right: float) -> bool:
    """True when dividing by zero."""
    return operator == "/" and right == 0


def check_sqrt_of_negative_number(operator: str, left: float) -> bool:
    """True when taking any root of a negative base, whatever the degree."""
    return operator == "$" and left < 0


def check_if_modulo_of_non_integer_value(operator: str, left: float, right: float) -> bool:
    """True when a modulus operand is not a whole number."""
    return operator == "%" and not (left.is_integer() and right.is_integer())


def check_if_modulo_by_zero(operator: str, right: float) -> bool:
    """True when taking an integer modulus by zero."""
    return operator == "%" and right == 0


def run_domain_checks(operator: str, left: float, right: float) -> None:
    """
    Apply every domain check in order, stopping at the first failure.

    A modulus by zero is only reported once both operands are known to be whole
    numbers, so ``5.5 % 0`` is a non-integer modulus.

    :param str operator: Operator character
    :param float left: Left operand value
    :param float right: Right operand value

    :raises CalculationError: With the code of the first failing check
    """
    if check_if_divided_by_zero(operator, right):
        code = ErrorCode.DIVIDE_BY_0
    elif check_sqrt_of_negative_number(operator, left):
        code = ErrorCode.SQRT_OF_NEGATIVE_NUMBER
    elif check_if_modulo_of_non_integer_value(operator, left, right):
        code = ErrorCode.MODULE_OF_NON_INTEGER_VALUE
    elif check_if_modulo_by_zero(operator, right):
        code = ErrorCode.DIVIDE_BY_0
    else:
        return

    logger.debug(f"❌ {code.value} for {left} {operator} {right}")
    raise CalculationError(code, f"{left} {operator} {right}")
