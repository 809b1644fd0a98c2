"""Clauses of a CNF formula, with literals written as signed integers.

A literal is a non-zero integer: ``v`` stands for variable ``v`` and
``-v`` for its negation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field


def _check_literal(literal: int) -> int:
    if literal == 0:
        raise ValueError("0 is not a literal")
    return literal


def literal_sort_key(literal: int) -> tuple[int, bool]:
    """Order literals by variable, the positive literal before the negative."""
    _check_literal(literal)
    return abs(literal), literal < 0


def normalize_literals(literals: Iterable[int]) -> list[int]:
    """Return the literals sorted by ``literal_sort_key`` without duplicates."""
    unique = {_check_literal(literal) for literal in literals}
    return sorted(unique, key=literal_sort_key)


@dataclass(eq=False)
class Clause:
    """A disjunction of literals; compared by identity."""

    literals: list[int]
    is_redundant: bool = False
    lbd: int = field(default=0)

    def __post_init__(self) -> None:
        self.literals = [_check_literal(literal) for literal in self.literals]

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.literals)

    def remove_literal(self, literal: int) -> None:
        """Remove ``literal``, keeping the order of the others."""
        try:
            self.literals.remove(literal)
        except ValueError:
            raise ValueError(f"literal {literal} is not in the clause") from None

    def lazy_detach(self) -> None:
        """Empty the clause; it is no longer usable afterwards."""
        self.literals.clear()

    @property
    def is_detached(self) -> bool:
        """Tell whether the clause has been emptied."""
        return not self.literals

    def update_lbd(self, level_of: Callable[[int], int]) -> int:
        """Set the LBD to the number of distinct levels of the clause's variables."""
        self.lbd = len({level_of(abs(literal)) for literal in self.literals})
        return self.lbd

    def __str__(self) -> str:
        return " ".join(str(literal) for literal in self.literals)