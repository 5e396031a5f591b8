"""Clauses: disjunctions of literals, evaluated against partial assignments."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from dpllsat.lit import Lit


class ClauseState(Enum):
    """Status of a clause under a partial assignment."""

    SAT = "sat"
    UNSAT = "unsat"
    UNIT = "unit"
    UNKNOWN = "unknown"


@dataclass
class Clause:
    """A disjunction of literals."""

    lits: list[Lit] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.lits = list(self.lits)

    @classmethod
    def _of(cls, lits: Iterable[Lit]) -> Clause:
        return cls(list(lits))

    def __len__(self) -> int:
        return len(self.lits)

    def __iter__(self) -> Iterator[Lit]:
        return iter(self.lits)

    def __getitem__(self, position: int) -> Lit:
        return self.lits[position]

    def check_if_unit(self, values: Sequence[int]) -> ClauseState:
        """Classify the clause, stopping early on a true literal or a second unset one."""
        unassigned = 0
        for lit in self.lits:
            if lit.is_sat(values):
                return ClauseState.SAT
            if lit.is_unset(values):
                if unassigned:
                    return ClauseState.UNKNOWN
                unassigned += 1
        return ClauseState.UNIT if unassigned == 1 else ClauseState.UNSAT

    def get_unit(self, values: Sequence[int]) -> Lit:
        """Return the first literal whose variable is unassigned."""
        for lit in self.lits:
            if lit.is_unset(values):
                return lit
        raise ValueError("clause has no unassigned literal")

    def check_clause_invariant(self, n: int) -> int:
        """Return a variable count, at least ``n``, that covers every literal."""
        new_n = n
        for lit in self.lits:
            if not lit.in_range(new_n):
                new_n = lit.idx + 1
        return new_n

    def no_duplicates(self) -> bool:
        """Return True if no variable occurs twice in the clause."""
        indexes = [lit.idx for lit in self.lits]
        return len(set(indexes)) == len(indexes)

    def vars_in_range(self, n: int) -> bool:
        """Return True if every literal's variable index is below ``n``."""
        return all(lit.in_range(n) for lit in self.lits)

    def is_sat(self, values: Sequence[int]) -> bool:
        """Return True if some literal is true."""
        return any(lit.is_sat(values) for lit in self.lits)

    def is_unsat(self, values: Sequence[int]) -> bool:
        """Return True if every literal is false."""
        return all(lit.is_unsat(values) for lit in self.lits)

    def is_unit(self, values: Sequence[int]) -> bool:
        """Return True if the clause is not satisfied and exactly one literal is unset."""
        if not self.vars_in_range(len(values)) or self.is_sat(values):
            return False
        return sum(1 for lit in self.lits if lit.is_unset(values)) == 1

    def is_unknown(self, values: Sequence[int]) -> bool:
        """Return True if the clause is neither satisfied nor falsified."""
        return not self.is_sat(values) and not self.is_unsat(values)