"""Test the command-line entrypoint."""
from pathlib import Path

import pytest

from form_calculator.main import ExpressionArgs, main, parse_args


def test_parse_args_calc() -> None:
    """The calc sub-command yields validated expression arguments."""
    args = parse_args(["--log-level", "debug", "calc", "2+3"])
    assert isinstance(args, ExpressionArgs)
    assert args.expression == "2+3"
    assert args.log_level == "DEBUG"


def test_parse_args_missing_batch_file(tmp_path: Path) -> None:
    """A batch file that does not exist is rejected by argument validation."""
    with pytest.raises(SystemExit):
        parse_args(["batch", str(tmp_path / "missing.txt")])


def test_parse_args_invalid_log_level() -> None:
    """Unknown log levels are rejected."""
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "loud", "calc", "1"])


@pytest.mark.parametrize("argv,code,output", [
    (["calc", "2+3*4"], 0, "14"),
    (["calc", "abc"], 1, "Invalid character: 'a'"),
    (["validate", "2++3"], 1, "No two operators in a row"),
    (["validate", "2 + 3"], 0, "Expression is valid"),
    (["clean", "2 + a3"], 0, "2+3"),
    (["name", "иванов", "иван", "иванович"], 0, "Иванов И.И."),
    (["name", "Ivanov", "I"], 1, "Error: First name must be at least 2 characters long"),
])
def test_main_commands(capsys, argv, code, output) -> None:
    """Each sub-command prints its outcome and returns the matching exit code."""
    assert main(argv) == code
    assert capsys.readouterr().out.strip() == output


def test_main_batch_default_output(capsys, tmp_path: Path) -> None:
    """Without --output the results file is written next to the input."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1.5*2\n")

    assert main(["batch", str(input_file)]) == 0

    output_file = tmp_path / "ops_results.txt"
    assert capsys.readouterr().out.strip() == str(output_file)
    assert output_file.read_text() == "1.5*2 = 3\n"


def test_main_batch_rejects_non_text_file(capsys, tmp_path: Path) -> None:
    """Inputs other than .txt files are reported with a non-zero exit code."""
    input_file = tmp_path / "ops.csv"
    input_file.write_text("1+1")
    output_file = tmp_path / "out.txt"

    assert main(["batch", str(input_file), "--output", str(output_file)]) == 1
    assert "Expected a .txt file" in capsys.readouterr().out
    assert not output_file.exists()
