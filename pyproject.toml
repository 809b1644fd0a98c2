[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sattools"
version = "0.1.0"
description = "Building blocks for SAT work: bitsets, clauses, CNF models and statistics, binary implication graphs, DIMACS CNF and DRAT proof output"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "cnf", "dimacs", "drat", "boolean satisfiability", "bitset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sattools"]

[tool.hatch.build.targets.sdist]
include = ["sattools", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
