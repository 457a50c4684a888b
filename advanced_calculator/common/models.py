"""Pydantic models for parsed expressions and evaluation results."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from advanced_calculator.common.errors import ERROR_MESSAGES, ErrorCode

OperatorToken = Literal["+", "-", "*", "/", "%", "^", "$", "!"]


class ParsedExpression(BaseModel):
    """Operand pair and operator of an expression that passed every syntactic gate."""

    model_config = ConfigDict(frozen=True)

    left: str = Field(..., description="Literal text of the left operand")
    operator: OperatorToken = Field(..., description="Operator character")
    right: str = Field(default="", description="Literal text of the right operand, empty for factorial")


class OperationResult(BaseModel):
    """
    Represents the outcome of an evaluated expression.

    Either ``value`` is set and ``error`` is ``ErrorCode.OK``, or ``value`` is None
    and ``error`` holds the reason the expression was rejected.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    value: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: ErrorCode = Field(default=ErrorCode.OK, description="Error classification")

    @model_validator(mode="after")
    def value_and_error_are_exclusive(self) -> "OperationResult":
        """Ensure a result carries either a value or an error, never both."""
        if self.error is ErrorCode.OK and self.value is None:
            raise ValueError("A successful result must carry a value")
        if self.error is not ErrorCode.OK and self.value is not None:
            raise ValueError(f"A failed result ({self.error.value}) cannot carry a value")
        return self

    @property
    def ok(self) -> bool:
        return self.error is ErrorCode.OK

    @property
    def message(self) -> str:
        """Human readable error message, ``OK`` on success."""
        return ERROR_MESSAGES[self.error]

    def to_line(self) -> str:
        """Format the result as one line of a results file."""
        if self.ok:
            return f"{self.expression} = {self.value}"
        return f"{self.expression} -> ERROR: {self.message}"
