"""Writing a model in DIMACS CNF format."""

from __future__ import annotations

import os

from sattools.cnf_model import CNFModel


def dumps(model: CNFModel) -> str:
    """Return the model as DIMACS CNF text."""
    lines = [f"p cnf {model.number_of_variables()} {model.number_of_clauses()}\n"]
    for clause in model.clauses():
        lines.append("".join(f"{literal} " for literal in clause) + "0 \n")
    return "".join(lines)


def dump(path: str | os.PathLike[str], model: CNFModel) -> None:
    """Write the model to ``path`` as DIMACS CNF text."""
    with open(path, "w", encoding="ascii") as stream:
        stream.write(dumps(model))