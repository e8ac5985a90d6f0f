# petmodels

Two small decision models about pets:

- **Survival forecast** (`petmodels.survival`): simulates a group of pets of
  one species and a given age, drawing each pet's lifetime from a normal
  distribution, and reports how many are still alive at the start of each of
  the following years.
- **TOPSIS ranking** (`petmodels.topsis`, command in `petmodels.cli`): scores
  a table of candidate pet options with the TOPSIS method, using
  species-specific criterion weights, and prints each option's closeness
  coefficient (higher is better).

Species names are accepted in `Title` case or `UPPER` case (`Cat` or `CAT`).
The survival forecast knows Cat, Dog, Rabbit and Lizard; the TOPSIS ranking
knows Cat, Dog, Rabbit, Hamster and Lizard.

## Installation

```
pip install .
```

## Survival forecast

```
pet-survival
```

With no arguments the command asks on standard input for the species, the
number of pets and their current age. They can also be given as arguments:

```
pet-survival Cat 1000000 6
```

It prints one line for each of 15 years:

```
Year 1: 1000000 pets are predicted to survive.
```

Results vary from run to run, since lifetimes are drawn at random. For an
unknown species it prints `The model of this specie is still in progress :)`;
if the given age is not below the species' average lifetime it prints a note
saying so instead of a forecast. Count or age that are not whole numbers give
an error and exit status 2.

From Python:

```python
import random
from petmodels.survival import simulate, species_profile

profile = species_profile("Cat")        # SpeciesProfile(name='cat', average_lifetime=12, std_deviation=1.6)
counts = simulate("Cat", 1000, 6, years=15, rng=random.Random(1))
```

`simulate` returns a list with one survivor count per year. It raises
`UnknownSpeciesError` for an unknown species and `ValueError` when the age is
at or above the average lifetime. `Pet` holds one animal's `current_age` and
`lifetime`, with `is_alive()` and `age_one_year()`.

## TOPSIS ranking

```
pet-topsis [--multiple] [VALUES ...]
```

The input is whitespace-separated tokens: the species, the number of rows,
then every value of the table row by row. The values are taken from the
arguments, or read from standard input when there are none. The default model
has 8 criteria per row; `--multiple` selects the model with a ninth, cost
criterion per row.

Columns 7 and 8 (counting from 1) are scored against a best interval
(ages 28 to 59, and 0 to 2 children); in the nine-column model the ninth
column is a cost, turned into the distance from the highest value.

```
echo "Cat 6 1 7 4 7 3 7 78 2 0 1 10 3 7 10 27 1 1 8 7 5 5 4 62 4 0 9 20 3 18 5 32 2 1 10 100 4 22 18 45 0 0 4 50 8 15 9 38 3" | pet-topsis
```

prints a line of instructions on the expected input, followed by

```
closest coefficients: 0.63818 0.0880036 0.642584 0.305568 0.879334 0.26832
```

An unknown species prints `The model of this specie is still in progress :)`.
A malformed or incomplete table gives an error on standard error and exit
status 2.

From Python:

```python
from petmodels.topsis import Model, evaluate

scores = evaluate("Dog", rows, Model.SINGLE)
```

`Model.SINGLE` is the 8-column model, `Model.MULTIPLE` the 9-column one. The
pipeline steps are also available one by one: `weights_for`, `forwardize`,
`normalize`, `apply_weights`, `positive_ideal`, `negative_ideal`,
`distances` and `closeness`. An unsupported species raises
`UnknownSpeciesError` (a `ValueError`). `petmodels.cli` also offers
`parse_input(text, model)`, which turns input text into a species and a
matrix, and `format_coefficients`, which formats the scores as printed above.

## What it does not do

Neither model fits its parameters: the lifetime statistics and the criterion
weights are fixed per species in the code, and species outside the lists
above are not supported. Nothing is stored between runs.