"""Validate and split single-operator arithmetic expressions."""
from typing import Tuple

from advanced_calculator.common.errors import CalculationError, ErrorCode
from advanced_calculator.common.logger import logger
from advanced_calculator.common.models import ParsedExpression

# Characters recognised as operators, in no particular order
OPERATOR_TOKENS: frozenset = frozenset("+-*/%^$!")

DIGITS: frozenset = frozenset("0123456789")

# Everything an expression may contain before spaces are stripped
ALLOWED_CHARACTERS: frozenset = DIGITS | OPERATOR_TOKENS | frozenset(". ")


class ExpressionParser:
    """
    Parse expressions made of one operator and at most two decimal operands.

    Design constraints:
        - No eval(), no dynamic code execution
        - No precedence, no parentheses, no chained operators

    Algorithm:
        1. Reject any character outside the allowed alphabet
        2. Strip spaces
        3. Locate the first operator, a leading minus being the sign of the left operand
        4. Split around the operator
        5. Check that both operands are well-formed decimal literals

    Examples:
        - "2 + 3" -> left "2", operator "+", right "3"
        - "-4 $ 2" -> left "-4", operator "$", right "2"
        - "5!" -> left "5", operator "!", right ""
    """

    @staticmethod
    def check_characters(expr: str) -> bool:
        """
        Check that every character of the expression is allowed.

        :param str expr: Raw expression

        :return: True if no forbidden character is present
        :rtype: bool
        """
        return all(char in ALLOWED_CHARACTERS for char in expr)

    @staticmethod
    def remove_spaces(expr: str) -> str:
        """Return the expression with every space removed."""
        return expr.replace(" ", "")

    @staticmethod
    def find_operation(expr: str) -> int:
        """
        Find the index of the first operator in a space-free expression.

        A leading ``-`` is the sign of the left operand and is skipped.

        :param str expr: Expression without spaces

        :return: Index of the operator, or ``len(expr)`` when there is none
        :rtype: int
        """
        start = 1 if expr.startswith("-") else 0
        for index in range(start, len(expr)):
            if expr[index] in OPERATOR_TOKENS:
                return index
        return len(expr)

    @staticmethod
    def separate_numbers(expr: str, index: int) -> Tuple[str, str]:
        """
        Split the expression around the operator found at ``index``.

        :param str expr: Expression without spaces
        :param int index: Operator position

        :return: Text before and text after the operator
        :rtype: Tuple[str, str]
        """
        return expr[:index], expr[index + 1:]

    @staticmethod
    def check_number(token: str) -> bool:
        """
        Determine if a token is a well-formed signed decimal literal.

        Accepted: ``12``, ``-3``, ``0.5``, ``-0.5``.
        Rejected: empty, ``.5``, ``-.5``, ``-``, ``5.``, ``1.2.3``.

        :param str token: Operand text

        :return: True if the token is a valid number
        :rtype: bool
        """
        if not token:
            return False
        if token[0] not in DIGITS and token[0] != "-":
            return False
        # A sign must be followed by a digit
        if token[0] == "-" and (len(token) < 2 or token[1] not in DIGITS):
            return False

        dots = 0
        for char in token[1:]:
            if char == ".":
                dots += 1
                if dots > 1:
                    return False
            elif char not in DIGITS:
                return False

        return not token.endswith(".")

    @staticmethod
    def parse(expr: str) -> ParsedExpression:
        """
        Run every syntactic gate and return the operand pair and operator.

        :param str expr: Raw expression

        :return: Parsed expression
        :rtype: ParsedExpression
        :raises CalculationError: With ``BAD_CHARACTER`` or ``BAD_FORMAT``
        """
        if not ExpressionParser.check_characters(expr):
            logger.debug(f"❌ Forbidden character in {expr!r}")
            raise CalculationError(ErrorCode.BAD_CHARACTER, repr(expr))

        cleaned = ExpressionParser.remove_spaces(expr)
        index = ExpressionParser.find_operation(cleaned)
        if index == len(cleaned):
            logger.debug(f"❌ No operator in {expr!r}")
            raise CalculationError(ErrorCode.BAD_FORMAT, f"no operator in {expr!r}")

        operator = cleaned[index]
        left, right = ExpressionParser.separate_numbers(cleaned, index)

        if operator == "!":
            # Factorial is unary: nothing may follow the operator
            if right or not ExpressionParser.check_number(left):
                logger.debug(f"❌ Malformed factorial {expr!r}")
                raise CalculationError(ErrorCode.BAD_FORMAT, repr(expr))
        elif not (ExpressionParser.check_number(left) and ExpressionParser.check_number(right)):
            logger.debug(f"❌ Malformed operands {left!r}, {right!r}")
            raise CalculationError(ErrorCode.BAD_FORMAT, repr(expr))

        return ParsedExpression(left=left, operator=operator, right=right)
