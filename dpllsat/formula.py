"""CNF formulas: a list of clauses over a fixed number of variables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from dpllsat.clause import Clause


class Status(Enum):
    """Outcome of a satisfiability check."""

    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SatResult:
    """A status together with an assignment when one is known."""

    status: Status
    assignment: list[int] | None = None

    @classmethod
    def sat(cls, assignment: Sequence[int] = ()) -> SatResult:
        return cls(Status.SAT, list(assignment))

    @classmethod
    def unsat(cls) -> SatResult:
        return cls(Status.UNSAT)

    @classmethod
    def unknown(cls) -> SatResult:
        return cls(Status.UNKNOWN)


@dataclass
class Formula:
    """A conjunction of clauses over ``num_vars`` variables."""

    clauses: list[Clause] = field(default_factory=list)
    num_vars: int = 0

    def __post_init__(self) -> None:
        self.clauses = list(self.clauses)
        if self.num_vars < 0:
            raise ValueError(f"number of variables must be non-negative, got {self.num_vars}")

    def check_and_establish_invariant(self) -> SatResult:
        """Settle trivial cases and widen ``num_vars`` so every literal is in range.

        An empty formula is satisfiable by the empty assignment; a formula with an
        empty clause is unsatisfiable. Otherwise the result is unknown and the
        formula afterwards satisfies :meth:`is_valid`.
        """
        if not self.clauses:
            return SatResult.sat()
        for clause in self.clauses:
            if not clause:
                return SatResult.unsat()
            self.num_vars = max(self.num_vars, clause.check_clause_invariant(self.num_vars))
        return SatResult.unknown()

    def is_valid(self) -> bool:
        """Return True if every literal's variable is below ``num_vars``."""
        return all(clause.vars_in_range(self.num_vars) for clause in self.clauses)

    def is_sat(self, values: Sequence[int]) -> bool:
        """Return True if every clause is satisfied by ``values``."""
        return all(clause.is_sat(values) for clause in self.clauses)

    def is_unsat(self, values: Sequence[int]) -> bool:
        """Return True if some clause is falsified by ``values``."""
        return any(clause.is_unsat(values) for clause in self.clauses)

    def contains_empty_clause(self) -> bool:
        """Return True if some clause has no literals."""
        return any(not clause for clause in self.clauses)

    def swap_literals(self, cref: int, j: int, k: int) -> None:
        """Exchange the literals at positions ``j`` and ``k`` of clause ``cref``."""
        lits = self.clauses[cref].lits
        lits[j], lits[k] = lits[k], lits[j]