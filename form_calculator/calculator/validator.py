"""Syntactic validation of arithmetic expressions."""
import math
import re
from typing import List

from form_calculator.calculator.sanitizer import ALLOWED_CHARS
from form_calculator.common.errors import (
    ConsecutiveOperators,
    EmptyExpression,
    EmptyOperand,
    InvalidCharacter,
    InvalidExpression,
    LeadingOrTrailingOperator,
    MalformedNumber,
)
from form_calculator.common.models import ValidationResult

OPERATOR_CHARS: str = "+*"

_CONSECUTIVE_OPERATORS = re.compile(r"[+*]{2,}")
_OPERATOR_SPLIT = re.compile(r"[+*]")

VALID_MESSAGE: str = "Expression is valid"


def check_expression(expression: str) -> None:
    """
    Run every validation rule, stopping at the first failure.

    Rules, in order:
        1. The expression is not empty.
        2. Every character is a digit, '.', '+', '*' or a space.
        3. Once whitespace is removed, something is left.
        4. No leading or trailing operator.
        5. No two operators in a row.
        6. Every operand is a non-empty, finite decimal number with at most one '.'.

    :param str expression: Expression to check, with or without spaces

    :raises InvalidExpression: Subclass naming the first rule that failed
    """
    if not expression:
        raise EmptyExpression()

    for char in expression:
        if char not in ALLOWED_CHARS:
            raise InvalidCharacter(char)

    compact: str = "".join(expression.split())
    if not compact:
        raise EmptyExpression()

    if compact[0] in OPERATOR_CHARS or compact[-1] in OPERATOR_CHARS:
        raise LeadingOrTrailingOperator()

    if _CONSECUTIVE_OPERATORS.search(compact):
        raise ConsecutiveOperators()

    numbers: List[str] = _OPERATOR_SPLIT.split(compact)
    for number in numbers:
        if not number:
            raise EmptyOperand()
        if number.count(".") > 1:
            raise MalformedNumber(number, "too many decimal points")
        try:
            value = float(number)
        except ValueError:
            raise MalformedNumber(number) from None
        if not math.isfinite(value):
            raise MalformedNumber(number, "out of range")


def validate(expression: str) -> ValidationResult:
    """
    Check an expression without raising.

    :param str expression: Expression to check

    :return: Validation outcome with the reason of the first failed rule
    :rtype: ValidationResult
    """
    try:
        check_expression(expression)
    except InvalidExpression as exc:
        return ValidationResult(is_valid=False, message=str(exc))
    return ValidationResult(is_valid=True, message=VALID_MESSAGE)
