"""A binary implication graph built from the two-literal clauses of a model."""

from __future__ import annotations

from collections.abc import Sequence

from sattools.clause import literal_sort_key
from sattools.cnf_model import CNFModel


class BinaryImplicationGraph:
    """For each literal, the literals implied through binary clauses."""

    def __init__(self, model: CNFModel) -> None:
        self._graph: dict[int, set[int]] = {}
        for clause in model.clauses():
            if len(clause) == 2:
                a, b = clause.literals
                self.add_binary_clause(a, b)

    def add_binary_clause(self, a: int, b: int) -> None:
        """Record the binary clause ``a or b``."""
        self._graph.setdefault(a, set()).add(-b)
        self._graph.setdefault(b, set()).add(-a)

    def resolve(self, clause: Sequence[int]) -> int | None:
        """Return the unit literal a binary clause resolves to, or None."""
        if len(clause) != 2:
            return None
        a, b = clause
        if b in self._graph.get(a, ()):
            return a
        if a in self._graph.get(b, ()):
            return b
        return None

    def __str__(self) -> str:
        lines = []
        for literal, implied in self._graph.items():
            targets = "".join(f"{target} " for target in sorted(implied, key=literal_sort_key))
            lines.append(f"[{literal}]:{targets}\n")
        return "".join(lines)