"""Test evaluating a file of expressions."""
from pathlib import Path

import pytest

from form_calculator.calculator.batch import build_output_path, read_expressions, run_batch


def test_read_expressions_skips_blank_lines(tmp_path: Path) -> None:
    """Lines are stripped and blank ones dropped."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1+1\n\n  2*2  \n\t\n")

    assert list(read_expressions(input_file)) == ["1+1", "2*2"]


def test_read_expressions_rejects_other_suffixes(tmp_path: Path) -> None:
    """Only .txt inputs are read."""
    input_file = tmp_path / "ops.zip"
    input_file.write_bytes(b"PK")

    with pytest.raises(ValueError, match="Expected a .txt file"):
        list(read_expressions(input_file))


def test_build_output_path() -> None:
    """Results land next to the input."""
    assert build_output_path(Path("resources") / "ops.txt") == Path("resources") / "ops_results.txt"


def test_run_batch_writes_results_and_errors(tmp_path: Path) -> None:
    """Each expression yields one line, in input order, errors included."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("2 + 3\n\n2*3+4*5\n2++3\nabc\n0.5*0.5\n")
    output_file = tmp_path / "results.txt"

    results = run_batch(input_file, output_file)

    assert [res.success for res in results] == [True, True, False, False, True]
    assert output_file.read_text().splitlines() == [
        "2 + 3 = 5",
        "2*3+4*5 = 26",
        "2++3 -> ERROR: No two operators in a row",
        "abc -> ERROR: Invalid character: 'a'",
        "0.5*0.5 = 0.25",
    ]


def test_run_batch_empty_file(tmp_path: Path) -> None:
    """A file without expressions produces an empty results file."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("\n\n")
    output_file = tmp_path / "results.txt"

    assert run_batch(input_file, output_file) == []
    assert output_file.read_text() == ""


def test_run_batch_rejected_input_leaves_no_output(tmp_path: Path) -> None:
    """A rejected input never creates the results file."""
    input_file = tmp_path / "ops.md"
    input_file.write_text("1+1\n")
    output_file = tmp_path / "results.txt"

    with pytest.raises(ValueError):
        run_batch(input_file, output_file)
    assert not output_file.exists()
