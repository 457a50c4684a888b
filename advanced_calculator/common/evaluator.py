"""Evaluate a single-operator expression into a value and an error code."""
from decimal import Decimal
import math
from typing import Tuple

from advanced_calculator.common.checks import run_domain_checks
from advanced_calculator.common.errors import CalculationError, ErrorCode
from advanced_calculator.common.logger import logger
from advanced_calculator.common.models import OperationResult, ParsedExpression
from advanced_calculator.common.operations import OPERATIONS
from advanced_calculator.common.parser import ExpressionParser


def compute(parsed: ParsedExpression) -> float:
    """
    Apply the domain checks and the operator of an already parsed expression.

    :param ParsedExpression parsed: Output of ``ExpressionParser.parse``

    :return: Computed value
    :rtype: float
    :raises CalculationError: If a domain check fails
    """
    left = float(parsed.left)
    if parsed.operator == "!":
        return OPERATIONS["!"](left, 0.0)

    right = float(parsed.right)
    run_domain_checks(parsed.operator, left, right)
    if parsed.operator == "%":
        # Both literals are whole numbers here; Decimal keeps digits a float would drop
        return OPERATIONS["%"](int(Decimal(parsed.left)), int(Decimal(parsed.right)))
    return OPERATIONS[parsed.operator](left, right)


def evaluate(expression: str) -> Tuple[float, ErrorCode]:
    """
    Evaluate an expression such as ``"2 + 3"``, ``"-4 $ 2"`` or ``"5!"``.

    Gates run in a fixed order and the first failing one decides the error. The value
    is ``nan`` whenever the error code is not ``ErrorCode.OK``.

    :param str expression: Raw expression

    :return: Tuple of (value, error code)
    :rtype: Tuple[float, ErrorCode]
    """
    try:
        value = compute(ExpressionParser.parse(expression))
    except CalculationError as exc:
        logger.debug(f"🧮❌ {expression!r} rejected: {exc}")
        return math.nan, exc.code

    logger.debug(f"🧮✅ {expression!r} = {value}")
    return value, ErrorCode.OK


def evaluate_operation(expression: str) -> OperationResult:
    """
    Evaluate an expression and wrap the outcome with the original text.

    :param str expression: Raw expression

    :return: Validated result model
    :rtype: OperationResult
    """
    value, error = evaluate(expression)
    if error is ErrorCode.OK:
        return OperationResult(expression=expression, value=value)
    return OperationResult(expression=expression, error=error)
