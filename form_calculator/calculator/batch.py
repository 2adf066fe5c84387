"""Evaluate a text file of expressions, one per line, into a results file."""
from itertools import chain
from pathlib import Path
from typing import Iterator, List

from form_calculator.calculator.evaluator import evaluate_safe
from form_calculator.common.logger import logger
from form_calculator.common.models import CalculationResult


def read_expressions(input_file: Path) -> Iterator[str]:
    """
    Yield the stripped, non-empty lines of a .txt file as they are read.

    :param Path input_file: Plain text file with one expression per line

    :return: Iterator over expressions
    :rtype: Iterator[str]
    :raises ValueError: If the file is not a .txt file
    """
    if input_file.suffix != ".txt":
        raise ValueError(f"📄❌ Expected a .txt file, got: {input_file.name}")

    with input_file.open(encoding="utf-8") as f_in:
        for line in f_in:
            expr = line.strip()
            if expr:
                yield expr


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results path next to the input file.

    Examples
    --------
    input: resources/operations.txt
    output: resources/operations_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    return input_path.with_name(f"{input_path.stem}_results.txt")


def format_line(expr: str, outcome: CalculationResult) -> str:
    """Render one results line: ``2+3 = 5`` or ``2++3 -> ERROR: <message>``."""
    if outcome.success:
        return f"{expr} = {outcome.render()}"
    return f"{expr} -> ERROR: {outcome.error}"


def run_batch(input_path: Path, output_path: Path) -> List[CalculationResult]:
    """
    Evaluate every expression of the input file and write one line per result.

    The input is checked before the output file is created, so a rejected input
    never leaves an empty results file behind.

    :param Path input_path: Text file with expressions
    :param Path output_path: Path where results will be written

    :return: Results in input order
    :rtype: List[CalculationResult]
    :raises ValueError: If the input is not a .txt file
    """
    expressions: Iterator[str] = read_expressions(input_path)
    # Generators run lazily; pull the first line to surface a rejected input early
    first = next(expressions, None)

    results: List[CalculationResult] = []
    with output_path.open("w", encoding="utf-8") as f_out:
        if first is not None:
            for expr in chain([first], expressions):
                outcome = evaluate_safe(expr)
                results.append(outcome)
                f_out.write(format_line(expr, outcome) + "\n")
                # Keep written lines on disk if the run is interrupted
                f_out.flush()

    failed = sum(1 for outcome in results if not outcome.success)
    logger.info(f"📝 Wrote {len(results)} results to {output_path} ({failed} errors)")
    return results
