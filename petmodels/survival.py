"""Monte Carlo forecast of how many pets survive each year."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO

from petmodels.topsis import UnknownSpeciesError

DEFAULT_YEARS = 15


@dataclass(frozen=True)
class SpeciesProfile:
    """Lifetime statistics of a species."""

    name: str
    average_lifetime: int
    std_deviation: float


_PROFILES = {
    "cat": SpeciesProfile("cat", 12, 1.6),
    "dog": SpeciesProfile("dog", 11, 1.6),
    "rabbit": SpeciesProfile("rabbit", 10, 1.4),
    "lizard": SpeciesProfile("lizard", 6, 0.8),
}

_NAMES = {
    "CAT": "cat",
    "Cat": "cat",
    "DOG": "dog",
    "Dog": "dog",
    "RABBIT": "rabbit",
    "Rabbit": "rabbit",
    "LIZARD": "lizard",
    "Lizard": "lizard",
}

_OUTLIVED = "Wow! Your pets alreay have a longer life than the average!"


@dataclass
class Pet:
    """A pet with its current age and the age at which it dies."""

    current_age: int
    lifetime: int

    def is_alive(self) -> bool:
        return self.current_age < self.lifetime

    def age_one_year(self) -> None:
        self.current_age += 1


def species_profile(species: str) -> SpeciesProfile:
    """Return the lifetime statistics of a species."""
    key = _NAMES.get(species)
    if key is None:
        raise UnknownSpeciesError(species)
    return _PROFILES[key]


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def simulate(
    species: str,
    count: int,
    age: int,
    years: int = DEFAULT_YEARS,
    rng: random.Random | None = None,
) -> list[int]:
    """Return the number of surviving pets at the start of each year.

    Raises ValueError when the pets are already older than the average lifetime.
    """
    profile = species_profile(species)
    if age >= profile.average_lifetime:
        raise ValueError(_OUTLIVED)
    rng = rng or random.Random()
    pets = [
        Pet(
            age,
            _round_half_away(
                rng.normalvariate(profile.average_lifetime, profile.std_deviation)
            ),
        )
        for _ in range(max(count, 0))
    ]
    survivors = []
    for _ in range(years):
        survivors.append(sum(pet.is_alive() for pet in pets))
        for pet in pets:
            pet.age_one_year()
    return survivors


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> str:
    print(prompt, end="", flush=True)
    return next(tokens, "")


def main(argv: Sequence[str] | None = None) -> int:
    """Forecast survivors from species, count and age given as arguments or on stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        if len(args) != 3:
            print("usage: survival SPECIES COUNT AGE", file=sys.stderr)
            return 2
        species, count_text, age_text = args
    else:
        tokens = _tokens(sys.stdin)
        species = _ask("Enter the specie of pets: ", tokens)
        count_text = _ask("Enter the number of pets: ", tokens)
        age_text = _ask("Enter the age of the pets: ", tokens)
    try:
        count, age = int(count_text), int(age_text)
    except ValueError:
        print("The number and age of pets must be whole numbers.", file=sys.stderr)
        return 2
    try:
        survivors = simulate(species, count, age)
    except UnknownSpeciesError:
        print("The model of this specie is still in progress :)")
        return 0
    except ValueError as error:
        print(error)
        return 0
    for year, alive in enumerate(survivors, start=1):
        print(f"Year {year}: {alive} pets are predicted to survive.")
    return 0