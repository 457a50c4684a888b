"""Test class ExpressionParser."""

import pytest

from advanced_calculator.common.errors import CalculationError, ErrorCode
from advanced_calculator.common.models import ParsedExpression
from advanced_calculator.common.parser import ExpressionParser


@pytest.mark.parametrize("expr,expected", [
    ("2 + 3", True),
    ("-0.5 $ 2", True),
    ("5!", True),
    ("7 % 3 ^ 2 / 1 * 4 - 1", True),
    ("", True),
    ("2a+3", False),
    ("2\t+3", False),
    ("2,5+1", False),
    ("1e5+1", False),
    ("(2+3)", False),
])
def test_check_characters(expr, expected):
    """check_characters only accepts digits, dots, spaces and operators."""
    assert ExpressionParser.check_characters(expr) == expected


def test_remove_spaces():
    """remove_spaces drops every space, wherever it is."""
    assert ExpressionParser.remove_spaces(" 1 2 +  3 ") == "12+3"


@pytest.mark.parametrize("expr,expected", [
    ("2+3", 1),
    ("-2+3", 2),
    ("2*-3", 1),
    ("12.5/4", 4),
    ("5!", 1),
    ("-3!", 2),
    ("2$3^4", 1),  # first occurrence wins
    ("-2", 2),     # leading minus is a sign, not an operator
    ("42", 2),
    ("", 0),
])
def test_find_operation(expr, expected):
    """find_operation returns the first operator index, or the length when there is none."""
    assert ExpressionParser.find_operation(expr) == expected


@pytest.mark.parametrize("expr,index,expected", [
    ("2+3", 1, ("2", "3")),
    ("-2.5*-4", 4, ("-2.5", "-4")),
    ("5!", 1, ("5", "")),
    ("!5", 0, ("", "5")),
])
def test_separate_numbers(expr, index, expected):
    """separate_numbers excludes the operator from both operands."""
    assert ExpressionParser.separate_numbers(expr, index) == expected


@pytest.mark.parametrize("token,expected", [
    ("123", True),
    ("45.67", True),
    ("-8.9", True),
    ("-0.5", True),
    ("0", True),
    ("007", True),
    ("", False),
    ("-", False),
    ("-.5", False),
    (".5", False),
    ("..2", False),
    ("5.", False),
    ("-5.", False),
    ("1.2.3", False),
    ("--5", False),
    ("5-", False),
    ("+5", False),
    ("abc", False),
    ("１２", False),  # non-ASCII digits
])
def test_check_number(token, expected):
    """check_number accepts signed decimal literals only."""
    assert ExpressionParser.check_number(token) == expected


@pytest.mark.parametrize("expr,expected", [
    ("2 + 3", ParsedExpression(left="2", operator="+", right="3")),
    ("-4 $ 2", ParsedExpression(left="-4", operator="$", right="2")),
    ("2 - -3", ParsedExpression(left="2", operator="-", right="-3")),
    ("5!", ParsedExpression(left="5", operator="!", right="")),
    ("-3 !", ParsedExpression(left="-3", operator="!", right="")),
])
def test_parse_valid(expr, expected):
    """parse returns the operand pair and operator of well-formed expressions."""
    assert ExpressionParser.parse(expr) == expected


@pytest.mark.parametrize("expr,code", [
    ("2a+3", ErrorCode.BAD_CHARACTER),
    ("2 & 3", ErrorCode.BAD_CHARACTER),
    ("", ErrorCode.BAD_FORMAT),
    ("   ", ErrorCode.BAD_FORMAT),
    ("5", ErrorCode.BAD_FORMAT),
    ("-5", ErrorCode.BAD_FORMAT),
    ("..2+3", ErrorCode.BAD_FORMAT),
    ("-.5+3", ErrorCode.BAD_FORMAT),
    ("2+", ErrorCode.BAD_FORMAT),
    ("+2", ErrorCode.BAD_FORMAT),
    ("2+3+4", ErrorCode.BAD_FORMAT),
    ("5!3", ErrorCode.BAD_FORMAT),
    ("!5", ErrorCode.BAD_FORMAT),
    ("5.!", ErrorCode.BAD_FORMAT),
])
def test_parse_invalid(expr, code):
    """parse raises CalculationError carrying the code of the first failing gate."""
    with pytest.raises(CalculationError) as exc_info:
        ExpressionParser.parse(expr)
    assert exc_info.value.code is code
