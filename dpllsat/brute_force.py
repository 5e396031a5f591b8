"""Exhaustive satisfiability check over every complete assignment."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import product

from dpllsat.clause_db import PackedLit

# Each variable is tried true before false.
_BRANCH_ORDER = (1, 0)


def clause_satisfied(clause: Iterable[PackedLit], values: Sequence[int]) -> bool:
    """Return True if some literal of ``clause`` is true under ``values``."""
    return any(lit.is_sat(values) for lit in clause)


@dataclass
class ExhaustiveFormula:
    """A CNF formula of packed literals over ``num_vars`` variables."""

    clauses: list[list[PackedLit]] = field(default_factory=list)
    num_vars: int = 0

    def __post_init__(self) -> None:
        self.clauses = [list(clause) for clause in self.clauses]
        if self.num_vars < 0:
            raise ValueError(f"number of variables must be non-negative, got {self.num_vars}")

    def is_valid(self) -> bool:
        """Return True if every literal's variable is below ``num_vars``."""
        return all(lit.in_range(self.num_vars) for clause in self.clauses for lit in clause)

    def evaluate(self, values: Sequence[int]) -> bool:
        """Return True if every clause is satisfied by the complete assignment ``values``.

        Raises ValueError if ``values`` does not hold one value per variable.
        """
        if len(values) != self.num_vars:
            raise ValueError(f"expected {self.num_vars} values, got {len(values)}")
        return all(clause_satisfied(clause, values) for clause in self.clauses)


def solve_exhaustive(formula: ExhaustiveFormula) -> bool:
    """Return True if some complete assignment satisfies ``formula``.

    Raises ValueError if a literal refers to a variable out of range.
    """
    if not formula.is_valid():
        raise ValueError("formula has a literal whose variable is out of range")
    return any(
        formula.evaluate(values)
        for values in product(_BRANCH_ORDER, repeat=formula.num_vars)
    )