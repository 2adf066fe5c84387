"""
Command-line entrypoint.

Sub-commands:
- calc: evaluate one expression and print the result or the error
- validate: print the validation message for one expression
- clean: print the sanitized expression
- batch: evaluate every line of a text file and write a results file
- name: format a full name as "Surname I.O."
"""

import argparse
from pathlib import Path
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, FilePath, ValidationError, field_validator

from form_calculator.calculator.batch import build_output_path, run_batch
from form_calculator.calculator.evaluator import evaluate_safe
from form_calculator.calculator.sanitizer import clean
from form_calculator.calculator.validator import validate
from form_calculator.common.logger import configure_logging, logger
from form_calculator.names.formatter import process_name_form

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    command : str
        Selected sub-command.
    log_level : LogLevel
        Level of the package logger.
    """

    model_config = ConfigDict(frozen=True)

    command: Literal["calc", "validate", "clean", "batch", "name"]
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    def upper_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


class ExpressionArgs(CliArgs):
    """Arguments of the calc, validate and clean sub-commands."""

    expression: str = Field(..., description="Arithmetic expression as typed")


class BatchArgs(CliArgs):
    """Arguments of the batch sub-command."""

    file_path: FilePath = Field(..., description="Text file with one expression per line")
    output: Optional[Path] = Field(default=None, description="Where to write the results")


class NameArgs(CliArgs):
    """Arguments of the name sub-command."""

    last: str = Field(..., description="Surname")
    first: str = Field(..., description="First name")
    middle: str = Field(default="", description="Middle name")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with all sub-commands.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="form-calculator",
        description="Evaluate '+'/'*' expressions and format personal names",
    )
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("calc", "Evaluate an expression"),
        ("validate", "Check an expression without evaluating it"),
        ("clean", "Strip an expression down to allowed characters"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("expression", help="Arithmetic expression, e.g. '2+3*4'")

    batch = subparsers.add_parser("batch", help="Evaluate every line of a text file")
    batch.add_argument("file_path", help="Path to a .txt file")
    batch.add_argument("--output", default=None, help="Results file (default: next to the input)")

    name = subparsers.add_parser("name", help="Format a full name as 'Surname I.O.'")
    name.add_argument("last", help="Surname")
    name.add_argument("first", help="First name")
    name.add_argument("middle", nargs="?", default="", help="Middle name (optional)")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments for the selected sub-command
    :rtype: CliArgs
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    model = {
        "calc": ExpressionArgs,
        "validate": ExpressionArgs,
        "clean": ExpressionArgs,
        "batch": BatchArgs,
        "name": NameArgs,
    }[args.command]

    try:
        return model(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the selected sub-command.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Process exit code, 0 on success and 1 when the input was rejected
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    if cli_args.command == "calc":
        outcome = evaluate_safe(cli_args.expression)
        print(outcome.render())
        return 0 if outcome.success else 1

    if cli_args.command == "validate":
        validation = validate(cli_args.expression)
        print(validation.message)
        return 0 if validation.is_valid else 1

    if cli_args.command == "clean":
        print(clean(cli_args.expression))
        return 0

    if cli_args.command == "batch":
        input_path = Path(cli_args.file_path)
        output_path = cli_args.output or build_output_path(input_path)
        try:
            run_batch(input_path, output_path)
        except ValueError as exc:
            logger.error(f"📄❌ Could not read expressions from {input_path}: {exc}")
            print(str(exc))
            return 1
        print(output_path)
        return 0

    formatted = process_name_form(cli_args.last, cli_args.first, cli_args.middle)
    print(formatted)
    return 1 if formatted.startswith("Error: ") else 0


if __name__ == "__main__":
    sys.exit(main())
