"""A CNF formula with per-literal occurrence lists."""

from __future__ import annotations

from collections.abc import Iterable

from sattools.clause import Clause, normalize_literals


class CNFModel:
    """The clauses of a CNF formula, with statistics and occurrence lists.

    Literals are non-zero signed integers.  The number of variables is the
    highest variable seen, and at least 1.
    """

    def __init__(self) -> None:
        self._max_variable = 1
        self._num_trivial_clauses = 0
        self._num_binary_clauses = 0
        self._num_ternary_clauses = 0
        self._clauses: list[Clause] = []
        self._occurrences: dict[int, list[Clause]] = {}

    def add_clause(self, literals: Iterable[int]) -> bool:
        """Add a problem clause; return False if it is a tautology and was dropped."""
        normalized = normalize_literals(literals)
        if not normalized:
            raise ValueError("a clause needs at least one literal")

        if any(
            current == -previous
            for previous, current in zip(normalized, normalized[1:])
        ):
            self._num_trivial_clauses += 1
            return False

        self._max_variable = max(self._max_variable, abs(normalized[-1]))

        if len(normalized) == 2:
            self._num_binary_clauses += 1
        elif len(normalized) == 3:
            self._num_ternary_clauses += 1

        self.add_clause_object(Clause(normalized, False))
        return True

    def add_clause_object(self, clause: Clause) -> None:
        """Add an existing clause and record it in the occurrence lists."""
        self._clauses.append(clause)
        for literal in clause:
            self._occurrences.setdefault(literal, []).append(clause)

    def number_of_variables(self) -> int:
        """Return the number of variables of the formula."""
        return self._max_variable

    def number_of_clauses(self) -> int:
        """Return the number of clauses held."""
        return len(self._clauses)

    def number_of_binary_clauses(self) -> int:
        """Return how many problem clauses had two literals."""
        return self._num_binary_clauses

    def number_of_ternary_clauses(self) -> int:
        """Return how many problem clauses had three literals."""
        return self._num_ternary_clauses

    def number_of_trivial_clauses(self) -> int:
        """Return how many tautologies were dropped."""
        return self._num_trivial_clauses

    def clauses(self) -> list[Clause]:
        """Return the list of clauses held by the model."""
        return self._clauses

    def clear_detached_clauses(self) -> None:
        """Drop every clause that has been emptied."""
        self._clauses[:] = [clause for clause in self._clauses if len(clause)]

    def remove_occurrence(self, literal: int, clause: Clause) -> None:
        """Remove ``clause`` from the occurrence list of ``literal``."""
        occurrences = self._occurrences.get(literal, [])
        for position, candidate in enumerate(occurrences):
            if candidate is clause:
                del occurrences[position]
                return
        raise ValueError(f"clause is not in the occurrence list of {literal}")

    def occurrence_list(self, literal: int) -> list[Clause]:
        """Return a copy of the clauses that contain ``literal``."""
        return list(self._occurrences.get(literal, []))

    def literal_with_shortest_occurrence_list(self, clause: Clause) -> int:
        """Return the first literal of ``clause`` with the fewest occurrences."""
        if not len(clause):
            raise ValueError("an empty clause has no literal")
        return min(clause, key=lambda literal: len(self._occurrences.get(literal, [])))