"""Strip raw input down to the characters an arithmetic expression may contain."""

# Digits, decimal point, the two supported operators and space
ALLOWED_CHARS: frozenset = frozenset("0123456789.+* ")


def clean(expression: str) -> str:
    """
    Keep only allowed characters, then drop whitespace.

    :param str expression: Raw user input

    :return: Sanitized expression (digits, '.', '+', '*' only)
    :rtype: str
    """
    if not expression:
        return ""
    kept = "".join(char for char in expression if char in ALLOWED_CHARS)
    return "".join(kept.split())
