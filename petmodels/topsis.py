"""TOPSIS ranking of pets from a decision matrix of criteria."""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import Sequence

Matrix = list[list[float]]

_AGE_COLUMN = 6
_CHILDREN_COLUMN = 7
_EXPENSE_COLUMN = 8

_MIN_BEST_AGE = 28
_MAX_BEST_AGE = 59
_MAX_AGE = 100
_MIN_BEST_CHILDREN = 0
_MAX_BEST_CHILDREN = 2
_MAX_CHILDREN = 5


class UnknownSpeciesError(ValueError):
    """Raised when no model exists for the requested species."""

    def __init__(self, species: str) -> None:
        super().__init__(f"The model of this specie is still in progress :) ({species!r})")
        self.species = species


class Model(Enum):
    """The two decision-matrix layouts, keyed by their column count."""

    SINGLE = 8
    MULTIPLE = 9

    @property
    def columns(self) -> int:
        return self.value


_SPECIES = {
    "CAT": "cat",
    "Cat": "cat",
    "DOG": "dog",
    "Dog": "dog",
    "RABBIT": "rabbit",
    "Rabbit": "rabbit",
    "HAMSTER": "hamster",
    "Hamster": "hamster",
    "LIZARD": "lizard",
    "Lizard": "lizard",
}

_WEIGHTS: dict[Model, dict[str, tuple[float, ...]]] = {
    Model.SINGLE: {
        "cat": (0.3453, 0.2018, 0.1249, 0.1144, 0.0679, 0.0679, 0.0389, 0.0389),
        "dog": (0.2864, 0.1835, 0.1861, 0.1100, 0.0758, 0.0802, 0.0464, 0.0316),
        "hamster": (0.3395, 0.1432, 0.2034, 0.0830, 0.0552, 0.1107, 0.0382, 0.0267),
        "rabbit": (0.3142, 0.2229, 0.1415, 0.0607, 0.1032, 0.0863, 0.0395, 0.0316),
        "lizard": (0.2542, 0.2955, 0.1453, 0.1162, 0.0791, 0.0570, 0.0313, 0.0214),
    },
    Model.MULTIPLE: {
        "cat": (0.3044, 0.1806, 0.1084, 0.0941, 0.0564, 0.0564, 0.0332, 0.0332, 0.1333),
        "dog": (0.2488, 0.1544, 0.1566, 0.0908, 0.0626, 0.0659, 0.0392, 0.0271, 0.1544),
        "hamster": (0.3107, 0.1337, 0.1825, 0.0713, 0.0492, 0.0930, 0.0339, 0.0239, 0.1019),
        "rabbit": (0.2787, 0.2053, 0.1310, 0.0510, 0.0852, 0.0708, 0.0337, 0.0276, 0.1168),
        "lizard": (0.2367, 0.2778, 0.1397, 0.1087, 0.0777, 0.0501, 0.0280, 0.0194, 0.0618),
    },
}


def weights_for(species: str, model: Model = Model.SINGLE) -> tuple[float, ...]:
    """Return the criterion weights of a species for the given model."""
    key = _SPECIES.get(species)
    if key is None:
        raise UnknownSpeciesError(species)
    return _WEIGHTS[model][key]


def _check_matrix(matrix: Sequence[Sequence[float]], columns: int | None = None) -> None:
    if not matrix:
        raise ValueError("decision matrix is empty")
    width = len(matrix[0]) if columns is None else columns
    for number, row in enumerate(matrix):
        if len(row) != width:
            raise ValueError(f"row {number} has {len(row)} values, expected {width}")


def _age_score(age: float) -> float:
    if age < _MIN_BEST_AGE:
        return 1 - (_MIN_BEST_AGE - age) / (_MIN_BEST_AGE - 1)
    if age <= _MAX_BEST_AGE:
        return 1.0
    return 1 - (age - _MAX_BEST_AGE) / (_MAX_AGE - _MAX_BEST_AGE)


def _children_score(children: float) -> float:
    if children < _MIN_BEST_CHILDREN:
        # The lower bound of the best interval is zero, so the penalty is unbounded.
        return -math.inf
    if children <= _MAX_BEST_CHILDREN:
        return 1.0
    return 1 - (children - _MAX_BEST_CHILDREN) / (_MAX_CHILDREN - _MAX_BEST_CHILDREN)


def forwardize(matrix: Sequence[Sequence[float]], model: Model = Model.SINGLE) -> Matrix:
    """Turn the interval and cost criteria into benefit criteria."""
    _check_matrix(matrix, model.columns)
    result = [[float(value) for value in row] for row in matrix]
    for row in result:
        row[_AGE_COLUMN] = _age_score(row[_AGE_COLUMN])
        row[_CHILDREN_COLUMN] = _children_score(row[_CHILDREN_COLUMN])
    if model is Model.MULTIPLE:
        highest = max(row[_EXPENSE_COLUMN] for row in result)
        for row in result:
            row[_EXPENSE_COLUMN] = highest - row[_EXPENSE_COLUMN]
    return result


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


def normalize(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Divide every column by its Euclidean norm."""
    _check_matrix(matrix)
    columns = []
    for column in zip(*matrix):
        norm = math.sqrt(sum(value * value for value in column))
        columns.append([_divide(value, norm) for value in column])
    return [list(row) for row in zip(*columns)]


def apply_weights(matrix: Sequence[Sequence[float]], weights: Sequence[float]) -> Matrix:
    """Multiply each column by its weight."""
    _check_matrix(matrix, len(weights))
    return [[value * weight for value, weight in zip(row, weights)] for row in matrix]


def positive_ideal(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Return the best value of every column."""
    _check_matrix(matrix)
    return [max(sys.float_info.min, *column) for column in zip(*matrix)]


def negative_ideal(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Return the worst value of every column."""
    _check_matrix(matrix)
    return [min(sys.float_info.max, *column) for column in zip(*matrix)]


def distances(matrix: Sequence[Sequence[float]], target: Sequence[float]) -> list[float]:
    """Return the Euclidean distance of every row from the target."""
    return [
        math.sqrt(sum((value - goal) ** 2 for value, goal in zip(row, target)))
        for row in matrix
    ]


def closeness(
    distance_ideal: Sequence[float], distance_negative: Sequence[float]
) -> list[float]:
    """Return the relative closeness of every row to the ideal solution."""
    if len(distance_ideal) != len(distance_negative):
        raise ValueError("distance sequences differ in length")
    return [
        _divide(negative, ideal + negative)
        for ideal, negative in zip(distance_ideal, distance_negative)
    ]


def evaluate(
    species: str, matrix: Sequence[Sequence[float]], model: Model = Model.SINGLE
) -> list[float]:
    """Run the whole TOPSIS procedure and return the closeness coefficients."""
    weights = weights_for(species, model)
    weighted = apply_weights(normalize(forwardize(matrix, model)), weights)
    best = positive_ideal(weighted)
    worst = negative_ideal(weighted)
    return closeness(distances(weighted, best), distances(weighted, worst))