"""Evaluate '+'/'*' arithmetic expressions, with or without exceptions."""
import math
from typing import List

from form_calculator.calculator.parser import ExpressionParser
from form_calculator.calculator.sanitizer import clean
from form_calculator.calculator.validator import check_expression
from form_calculator.common.errors import ExpressionError, NumericOverflow, StructuralMismatch
from form_calculator.common.logger import logger
from form_calculator.common.models import CalculationResult, ParsedExpression


def reduce_terms(parsed: ParsedExpression) -> float:
    """
    Fold parsed operands into a single value, multiplication before addition.

    Each run of multiplications collapses into one term; the terms are summed at the end.
    Example: 2*3+4*5 -> terms [6, 20] -> 26

    :param ParsedExpression parsed: Operands and operators of the expression

    :return: Computed value
    :rtype: float
    :raises StructuralMismatch: If operands and operators do not line up
    """
    operands, operators = parsed.operands, parsed.operators
    if len(operands) != len(operators) + 1:
        raise StructuralMismatch(len(operands), len(operators))

    terms: List[float] = [operands[0]]
    for i, op in enumerate(operators):
        if op == "*":
            terms[-1] *= operands[i + 1]
        else:
            terms.append(operands[i + 1])

    return sum(terms)


def evaluate(expression: str) -> float:
    """
    Validate, sanitize, parse and evaluate an expression.

    :param str expression: Raw expression, spaces allowed

    :return: Computed result as float
    :rtype: float
    :raises InvalidExpression: If the expression fails validation
    :raises StructuralMismatch: If parsing yields mismatched operands and operators
    :raises NumericOverflow: If the result is infinite or NaN
    """
    check_expression(expression)
    parsed: ParsedExpression = ExpressionParser.parse(clean(expression))
    result: float = reduce_terms(parsed)
    if not math.isfinite(result):
        raise NumericOverflow()
    logger.debug(f"🧮 Evaluated {expression!r} = {result}")
    return result


def evaluate_safe(expression: str) -> CalculationResult:
    """
    Evaluate an expression, reporting failures in the result instead of raising.

    :param str expression: Raw expression

    :return: Value on success, error message on failure
    :rtype: CalculationResult
    """
    try:
        return CalculationResult.ok(evaluate(expression))
    except ExpressionError as exc:
        logger.warning(f"🧮❌ Could not evaluate {expression!r}: {exc}")
        return CalculationResult.fail(str(exc))
