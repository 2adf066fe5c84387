"""Pydantic models exchanged between the calculator components and their callers."""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Operator = Literal["+", "*"]

# Floats lose integer precision past this magnitude
INTEGER_DISPLAY_LIMIT: float = 1e15


class ValidationResult(BaseModel):
    """Outcome of a validation check, valid or not, with a human-readable message."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True when the checked value is safe to use")
    message: str = Field(..., description="Explanation of the outcome")


class ParsedExpression(BaseModel):
    """Operands and operators of an expression, in the order they appear."""

    model_config = ConfigDict(frozen=True)

    operands: List[float] = Field(default_factory=list, description="Numeric operands")
    operators: List[Operator] = Field(default_factory=list, description="Binary operators")


class CalculationResult(BaseModel):
    """
    Tagged result of a safe evaluation.

    Either ``success`` is True and ``result`` holds the value,
    or ``success`` is False and ``error`` holds the failure message.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the expression was evaluated")
    result: Optional[float] = Field(default=None, description="Evaluated value on success")
    error: Optional[str] = Field(default=None, description="Failure message otherwise")

    @model_validator(mode="after")
    def exactly_one_branch(self) -> "CalculationResult":
        """Ensure only the branch matching ``success`` is populated."""
        if self.success and (self.result is None or self.error is not None):
            raise ValueError("A successful result needs a value and no error")
        if not self.success and (self.error is None or self.result is not None):
            raise ValueError("A failed result needs an error and no value")
        return self

    @classmethod
    def ok(cls, value: float) -> "CalculationResult":
        return cls(success=True, result=value)

    @classmethod
    def fail(cls, message: str) -> "CalculationResult":
        return cls(success=False, error=message)

    def render(self) -> str:
        """
        Return the text shown to the user: the value, or the error message.

        Integral values below 1e15 are shown without a trailing ``.0``; larger
        values keep the float notation (``1e+23``) instead of spurious digits.

        :return: Display text
        :rtype: str
        """
        if not self.success:
            return self.error
        if self.result.is_integer() and abs(self.result) < INTEGER_DISPLAY_LIMIT:
            return str(int(self.result))
        return str(self.result)
