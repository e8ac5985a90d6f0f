[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petmodels"
version = "0.1.0"
description = "Pet survival forecasts and TOPSIS ranking of pet options"
requires-python = ">=3.10"
dependencies = []
keywords = ["topsis", "decision-making", "monte-carlo", "simulation", "pets", "survival"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pet-survival = "petmodels.survival:main"
pet-topsis = "petmodels.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["petmodels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
