"""Normalize a person's full name and format it as "Surname I.O." initials."""
import re

from form_calculator.common.logger import logger
from form_calculator.common.models import ValidationResult

MIN_NAME_LENGTH: int = 2

# Latin and Cyrillic letters, whitespace and hyphens
_NAME_PATTERN = re.compile(r"^[A-Za-zА-Яа-яЁё\s-]+$")
_LETTERS_ONLY = re.compile(r"^[A-Za-zА-Яа-яЁё]+$")
_SEPARATORS = re.compile(r"[-\s]")

# Field labels used in messages, in validation order
_FIELDS = (("last", "Surname"), ("first", "First name"), ("middle", "Middle name"))


def parse_name(name: str) -> str:
    """
    Trim, collapse inner whitespace and capitalize every word.

    :param str name: Raw name as typed

    :return: Normalized name, e.g. "  иВАНОВ  " -> "Иванов"
    :rtype: str
    """
    words = name.split()
    return " ".join(word[0].upper() + word[1:].lower() for word in words)


def validate_names(last: str, first: str, middle: str = "") -> ValidationResult:
    """
    Check parsed names for length and allowed characters.

    The middle name is optional and only checked when given.

    :param str last: Parsed surname
    :param str first: Parsed first name
    :param str middle: Parsed middle name, may be empty

    :return: Validation outcome naming the first offending field
    :rtype: ValidationResult
    """
    values = {"last": last, "first": first, "middle": middle}
    present = [(label, values[key]) for key, label in _FIELDS if key != "middle" or middle]

    for label, value in present:
        if len(value) < MIN_NAME_LENGTH:
            return ValidationResult(
                is_valid=False, message=f"{label} must be at least {MIN_NAME_LENGTH} characters long"
            )

    for label, value in present:
        if not _NAME_PATTERN.match(value):
            return ValidationResult(is_valid=False, message=f"{label} contains invalid characters")

    for label, value in present:
        if not _LETTERS_ONLY.match(_SEPARATORS.sub("", value)):
            return ValidationResult(is_valid=False, message=f"{label} must contain only letters")

    return ValidationResult(is_valid=True, message="Names are valid")


def format_initials(last: str, first: str, middle: str = "") -> str:
    """Return "Last F.M.", omitting the middle initial when there is no middle name."""
    first_initial = f"{first[0]}." if first else ""
    middle_initial = f"{middle[0]}." if middle else ""
    return f"{last} {first_initial}{middle_initial}".strip()


def process_name_form(last: str, first: str, middle: str = "") -> str:
    """
    Normalize, validate and format a full name.

    :param str last: Surname, required
    :param str first: First name, required
    :param str middle: Middle name, optional

    :return: Formatted name such as "Иванов И.И.", or a message starting with "Error: "
    :rtype: str
    """
    if not last.strip() or not first.strip():
        return "Error: surname and first name are required"

    parsed_last = parse_name(last)
    parsed_first = parse_name(first)
    parsed_middle = parse_name(middle) if middle else ""

    validation = validate_names(parsed_last, parsed_first, parsed_middle)
    if not validation.is_valid:
        logger.warning(f"🪪❌ Rejected name {last!r} {first!r} {middle!r}: {validation.message}")
        return f"Error: {validation.message}"

    return format_initials(parsed_last, parsed_first, parsed_middle)
