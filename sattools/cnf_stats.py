"""Statistics gathered while reading a CNF formula."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sattools.clause import Clause, normalize_literals


@dataclass
class LiteralStat:
    """Counts of clauses and of their positive and negative literals."""

    name: str
    clauses: int = 0
    literals: int = 0
    positive: int = 0
    negative: int = 0

    def add(self, size: int, positive: int, negative: int) -> None:
        """Record one clause of ``size`` literals."""
        self.clauses += 1
        self.literals += size
        self.positive += positive
        self.negative += negative

    def __str__(self) -> str:
        return (
            f"{self.name}: {self.clauses} clauses, {self.literals} literals "
            f"({self.positive} positive, {self.negative} negative)"
        )


def _percent(part: int, whole: int) -> str:
    return f"{100.0 * part / whole:.2f}%" if whole else "0.00%"


class CNFStats:
    """Collect clauses and count them by size and by literal polarity."""

    def __init__(self) -> None:
        self._max_variable = 1
        self.trivial_clauses = 0
        self.unary = LiteralStat("unary clauses")
        self.binary = LiteralStat("binary clauses")
        self.ternary = LiteralStat("ternary clauses")
        self.large = LiteralStat("large clauses")
        self.clauses: list[Clause] = []

    def add_clause(self, literals: Iterable[int]) -> bool:
        """Add a clause; return False if it is a tautology and was dropped."""
        normalized = normalize_literals(literals)
        if not normalized:
            raise ValueError("a clause needs at least one literal")

        if any(
            current == -previous
            for previous, current in zip(normalized, normalized[1:])
        ):
            self.trivial_clauses += 1
            return False

        self._max_variable = max(self._max_variable, abs(normalized[-1]))

        positive = sum(1 for literal in normalized if literal > 0)
        negative = len(normalized) - positive
        self._stat_for(len(normalized)).add(len(normalized), positive, negative)

        self.clauses.append(Clause(normalized, False))
        return True

    def _stat_for(self, size: int) -> LiteralStat:
        return {1: self.unary, 2: self.binary, 3: self.ternary}.get(size, self.large)

    def number_of_variables(self) -> int:
        """Return the highest variable seen, and at least 1."""
        return self._max_variable

    def number_of_clauses(self) -> int:
        """Return the number of clauses kept."""
        return len(self.clauses)

    def number_of_unary_clauses(self) -> int:
        """Return the number of one-literal clauses."""
        return self.unary.clauses

    def number_of_binary_clauses(self) -> int:
        """Return the number of two-literal clauses."""
        return self.binary.clauses

    def number_of_ternary_clauses(self) -> int:
        """Return the number of three-literal clauses."""
        return self.ternary.clauses

    def number_of_large_clauses(self) -> int:
        """Return the number of clauses with more than three literals."""
        return self.large.clauses

    def summarize(self) -> str:
        """Return a textual report of the instance and its clause statistics."""
        total = self.number_of_clauses()
        lines = [
            "Instance Informations",
            f"Number of variables: {self.number_of_variables()}",
            f"Number of clauses: {total}",
        ]
        for stat in (self.unary, self.binary, self.ternary, self.large):
            lines.append(f" |- {stat.name}: {stat.clauses} ({_percent(stat.clauses, total)})")
        lines.append("CNF Statistics")
        lines.extend(str(stat) for stat in (self.unary, self.binary, self.ternary, self.large))
        return "\n".join(lines) + "\n"