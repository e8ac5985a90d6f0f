import io
import math

import pytest

from petmodels.cli import format_coefficients, main, parse_input
from petmodels.topsis import Model, UnknownSpeciesError

SINGLE_CAT = (
    "Cat 6 1 7 4 7 3 7 78 2 0 1 10 3 7 10 27 1 1 8 7 5 5 4 62 4 0 9 20 3 18 5 "
    "32 2 1 10 100 4 22 18 45 0 0 4 50 8 15 9 38 3"
)
MULTIPLE_CAT = (
    "Cat 6 1 7 4 7 3 7 78 2 0 0 1 10 3 7 10 27 1 1 1 8 7 5 5 4 62 4 0 0 9 20 3 "
    "18 5 32 2 2 1 10 100 4 22 18 45 0 3 0 4 50 8 15 9 38 3 2"
)
SINGLE_EXPECTED = [0.63818, 0.0880036, 0.642584, 0.305568, 0.879334, 0.26832]


def test_parse_input_single_model_shape():
    species, matrix = parse_input(SINGLE_CAT)
    assert species == "Cat"
    assert len(matrix) == 6
    assert all(len(row) == 8 for row in matrix)
    assert matrix[0] == [1.0, 7.0, 4.0, 7.0, 3.0, 7.0, 78.0, 2.0]


def test_parse_input_multiple_model_shape():
    species, matrix = parse_input(MULTIPLE_CAT, Model.MULTIPLE)
    assert species == "Cat"
    assert len(matrix) == 6
    assert all(len(row) == 9 for row in matrix)
    assert matrix[-1][-1] == 2.0


def test_parse_input_unknown_species():
    with pytest.raises(UnknownSpeciesError):
        parse_input("Parrot 1 1 2 3 4 5 6 7 8")


def test_parse_input_short_table():
    with pytest.raises(ValueError, match="row 1"):
        parse_input("Dog 2 1 2 3 4 5 6 7 8 1 2 3")


def test_parse_input_bad_number():
    with pytest.raises(ValueError, match="not a number"):
        parse_input("Dog 1 1 2 x 4 5 6 7 8")


def test_parse_input_bad_row_count():
    with pytest.raises(ValueError):
        parse_input("Dog many 1 2 3")
    with pytest.raises(ValueError):
        parse_input("Dog 0")


def test_parse_input_empty():
    with pytest.raises(ValueError):
        parse_input("   ")


def test_format_coefficients_uses_given_values():
    assert format_coefficients([0.5, 0.25]) == "0.5 0.25"
    assert format_coefficients([]) == ""


def test_format_coefficients_nan():
    assert format_coefficients([math.nan]) == "nan"


def test_main_single_worked_example(capsys):
    assert main(SINGLE_CAT.split()) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1].startswith("closest coefficients: ")
    values = [float(token) for token in out[-1].split(":")[1].split()]
    assert values == pytest.approx(SINGLE_EXPECTED, rel=1e-4)


def test_main_multiple_model_bounds(capsys):
    assert main(["--multiple", *MULTIPLE_CAT.split()]) == 0
    line = capsys.readouterr().out.splitlines()[-1]
    values = [float(token) for token in line.split(":")[1].split()]
    assert len(values) == 6
    assert all(0.0 <= value <= 1.0 for value in values)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SINGLE_CAT + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("Input to the code as:")
    assert "closest coefficients:" in out


def test_main_unknown_species(capsys):
    assert main(["Parrot", "1", "1", "2", "3", "4", "5", "6", "7", "8"]) == 0
    out = capsys.readouterr().out
    assert "The model of this specie is still in progress :)" in out
    assert "closest coefficients" not in out


def test_main_malformed_input(capsys):
    assert main(["Dog", "2", "1", "2"]) == 2
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert "closest coefficients" not in captured.out