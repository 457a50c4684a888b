"""Error codes reported by the calculator and the exception used to carry them."""
from enum import Enum
from types import MappingProxyType


class ErrorCode(str, Enum):
    """Outcome of an evaluation. Exactly one code is reported per expression."""

    OK = "OK"
    BAD_CHARACTER = "BadCharacter"
    BAD_FORMAT = "BadFormat"
    DIVIDE_BY_0 = "DivideBy0"
    SQRT_OF_NEGATIVE_NUMBER = "SqrtOfNegativeNumber"
    MODULE_OF_NON_INTEGER_VALUE = "ModuleOfNonIntegerValue"


ERROR_MESSAGES = MappingProxyType({
    ErrorCode.OK: "OK",
    ErrorCode.BAD_CHARACTER: "Expression contains a forbidden character",
    ErrorCode.BAD_FORMAT: "Expression is not a well-formed operation",
    ErrorCode.DIVIDE_BY_0: "Division by zero",
    ErrorCode.SQRT_OF_NEGATIVE_NUMBER: "Root of a negative number",
    ErrorCode.MODULE_OF_NON_INTEGER_VALUE: "Modulus of a non-integer value",
})


class CalculationError(ValueError):
    """
    Raised by a validation gate when an expression is rejected.

    :param ErrorCode code: Error classification
    :param str detail: Optional context about the rejected input
    """

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = code
        self.detail = detail
        message = ERROR_MESSAGES[code]
        super().__init__(f"{message}: {detail}" if detail else message)
