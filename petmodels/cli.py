"""Command line front end for the TOPSIS pet ranking."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from petmodels.topsis import Matrix, Model, UnknownSpeciesError, evaluate, weights_for

_INSTRUCTIONS = (
    "Input to the code as: the specie of the pet (Cat, Dog, Rabbit, Hamster, Lizard) "
    "+ number of rows of the table + each number in the table (from column to row)"
)
_IN_PROGRESS = "The model of this specie is still in progress :)"


def _number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def parse_input(text: str, model: Model = Model.SINGLE) -> tuple[str, Matrix]:
    """Read the species, the row count and the decision matrix from text.

    Raises UnknownSpeciesError for a species without a model and ValueError
    for a malformed or incomplete table.
    """
    tokens = iter(text.split())
    species = next(tokens, None)
    if species is None:
        raise ValueError("no species given")
    weights_for(species, model)

    count_token = next(tokens, None)
    if count_token is None:
        raise ValueError("no row count given")
    try:
        rows = int(count_token)
    except ValueError:
        raise ValueError(f"row count is not a whole number: {count_token!r}") from None
    if rows <= 0:
        raise ValueError("the table needs at least one row")

    matrix: Matrix = []
    for number in range(rows):
        row = [_number(token) for token in _take(tokens, model.columns)]
        if len(row) != model.columns:
            raise ValueError(
                f"row {number} has {len(row)} values, expected {model.columns}"
            )
        matrix.append(row)
    return species, matrix


def _take(tokens: Iterable[str], count: int) -> list[str]:
    taken = []
    for token in tokens:
        taken.append(token)
        if len(taken) == count:
            break
    return taken


def format_coefficients(coefficients: Iterable[float]) -> str:
    """Format the coefficients with six significant digits, space separated."""
    return " ".join(f"{value:g}" for value in coefficients)


def main(argv: Sequence[str] | None = None) -> int:
    """Rank pets read from the arguments or from standard input."""
    parser = argparse.ArgumentParser(
        prog="petmodels",
        description="Rank pets with TOPSIS from a decision matrix.",
    )
    parser.add_argument(
        "--multiple",
        action="store_true",
        help="use the nine-column model that includes the expense criterion",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="species, row count and table values; read from stdin when absent",
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    model = Model.MULTIPLE if args.multiple else Model.SINGLE

    print(_INSTRUCTIONS)
    text = " ".join(args.values) if args.values else sys.stdin.read()
    try:
        species, matrix = parse_input(text, model)
    except UnknownSpeciesError:
        print(_IN_PROGRESS)
        return 0
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    coefficients = evaluate(species, matrix, model)
    print(f"closest coefficients: {format_coefficients(coefficients)} ")
    return 0