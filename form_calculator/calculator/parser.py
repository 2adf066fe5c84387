"""Split validated arithmetic expressions into operands and operators."""
from typing import List

from form_calculator.common.models import Operator, ParsedExpression

NUMBER_CHARS: str = "0123456789."
OPERATORS: str = "+*"


class ExpressionParser:
    """
    Parse sanitized arithmetic expressions made of decimals, '+' and '*'.

    Design constraints:
        - No eval(), no dynamic code execution
        - Single left-to-right scan, O(n) in the expression length

    The input must already have passed validation; the parser does not re-check it.

    Examples:
        - Expression: 2+3.5*4
        - Operands: [2.0, 3.5, 4.0]
        - Operators: ["+", "*"]
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an expression into number and operator tokens.

        :param str expr: Sanitized expression (e.g. "3+4*2")

        :return: List of tokens
        :rtype: List[str]
        """
        tokens: List[str] = []
        buffer: str = ""
        for char in expr:
            if char in NUMBER_CHARS:
                buffer += char
            elif char in OPERATORS:
                if buffer:
                    tokens.append(buffer)
                    buffer = ""
                tokens.append(char)
        if buffer:
            tokens.append(buffer)
        return tokens

    @staticmethod
    def parse(expr: str) -> ParsedExpression:
        """
        Collect operands and operators in the order they appear.

        :param str expr: Sanitized, validated expression

        :return: Parsed operands and operators
        :rtype: ParsedExpression
        """
        operands: List[float] = []
        operators: List[Operator] = []

        for token in ExpressionParser.tokenize(expr):
            if token in OPERATORS:
                operators.append(token)
            else:
                operands.append(float(token))

        return ParsedExpression(operands=operands, operators=operators)
