"""Exceptions raised while validating and evaluating arithmetic expressions."""


class ExpressionError(ValueError):
    """Base class for every expression failure."""


class InvalidExpression(ExpressionError):
    """The expression failed validation; the message is the validator's reason."""


class EmptyExpression(InvalidExpression):
    def __init__(self) -> None:
        super().__init__("Expression cannot be empty")


class InvalidCharacter(InvalidExpression):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid character: {char!r}")


class LeadingOrTrailingOperator(InvalidExpression):
    def __init__(self) -> None:
        super().__init__("Expression cannot start or end with an operator")


class ConsecutiveOperators(InvalidExpression):
    def __init__(self) -> None:
        super().__init__("No two operators in a row")


class EmptyOperand(InvalidExpression):
    def __init__(self) -> None:
        super().__init__("Empty number between operators")


class MalformedNumber(InvalidExpression):
    def __init__(self, number: str, detail: str = "") -> None:
        self.number = number
        suffix = f" ({detail})" if detail else ""
        super().__init__(f"Malformed number: {number}{suffix}")


class StructuralMismatch(ExpressionError):
    """Parsed operands and operators do not line up (operands != operators + 1)."""

    def __init__(self, operands: int, operators: int) -> None:
        super().__init__(
            f"Invalid number of operands and operators: {operands} operands, {operators} operators"
        )


class NumericOverflow(ExpressionError):
    """The computed value left the floating-point range."""

    def __init__(self) -> None:
        super().__init__("Result is out of range")
