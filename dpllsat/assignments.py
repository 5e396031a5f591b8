"""Partial assignments and unit propagation over them."""

from __future__ import annotations

from dataclasses import dataclass, field

from dpllsat.clause import ClauseState
from dpllsat.decision import Decisions
from dpllsat.formula import Formula
from dpllsat.lit import is_unset_value

ASSIGNED_FALSE = 0
ASSIGNED_TRUE = 1
UNSET = 2


def bool_to_assigned(b: bool) -> int:
    """Return the assignment value for a truth value: 1 for True, 0 for False."""
    if b:
        return ASSIGNED_TRUE
    return ASSIGNED_FALSE


def flip_value(value: int) -> int:
    """Swap 0 and 1; leave unset values as they are."""
    if value == ASSIGNED_FALSE:
        return ASSIGNED_TRUE
    if value == ASSIGNED_TRUE:
        return ASSIGNED_FALSE
    return value


@dataclass
class Assignments:
    """Values for each variable (0 false, 1 true, 2 or more unset).

    ``next_decision`` is the position in the decision order from which the
    search for the next unassigned variable starts.
    """

    values: list[int] = field(default_factory=list)
    next_decision: int = 0

    def __post_init__(self) -> None:
        self.values = list(self.values)

    @classmethod
    def for_formula(cls, formula: Formula) -> Assignments:
        """Return an assignment with every variable of ``formula`` unset."""
        return cls([UNSET] * formula.num_vars, 0)

    def __len__(self) -> int:
        return len(self.values)

    def copy(self) -> Assignments:
        """Return an independent copy."""
        return Assignments(list(self.values), self.next_decision)

    def is_complete(self) -> bool:
        """Return True if no variable is unset."""
        return not any(is_unset_value(value) for value in self.values)

    def is_compatible(self, other: Assignments) -> bool:
        """Return True if ``other`` agrees with every variable assigned here."""
        return len(self.values) == len(other.values) and all(
            is_unset_value(mine) or mine == theirs
            for mine, theirs in zip(self.values, other.values)
        )

    def find_unassigned(self, decisions: Decisions) -> int:
        """Return the next unset variable, following the decision order first.

        Raises ValueError if every variable is assigned.
        """
        order = decisions.lit_order
        for position in range(self.next_decision, len(order)):
            var = order[position]
            if is_unset_value(self.values[var]):
                self.next_decision = position + 1
                return var
        for var, value in enumerate(self.values):
            if is_unset_value(value):
                return var
        raise ValueError("every variable is already assigned")

    def unit_prop_once(self, index: int, formula: Formula) -> ClauseState:
        """Classify clause ``index``; if it is unit, assign its unset literal."""
        clause = formula.clauses[index]
        state = clause.check_if_unit(self.values)
        if state is ClauseState.UNIT:
            lit = clause.get_unit(self.values)
            self.values[lit.idx] = bool_to_assigned(lit.polarity)
        return state

    def unit_propagate(self, formula: Formula) -> ClauseState:
        """Run one pass of unit propagation over every clause.

        Returns UNSAT as soon as a clause is falsified, UNIT if any clause
        forced an assignment, UNKNOWN if some clause is undecided, and SAT if
        every clause is satisfied.
        """
        out = ClauseState.SAT
        for index in range(len(formula.clauses)):
            state = self.unit_prop_once(index, formula)
            if state is ClauseState.UNSAT:
                return ClauseState.UNSAT
            if state is ClauseState.UNIT:
                out = ClauseState.UNIT
            elif state is ClauseState.UNKNOWN and out is ClauseState.SAT:
                out = ClauseState.UNKNOWN
        return out

    def do_unit_propagation(self, formula: Formula) -> bool | None:
        """Propagate to a fixed point.

        Returns True if the formula is satisfied, False if it is falsified and
        None if it is still undecided.
        """
        while True:
            state = self.unit_propagate(formula)
            if state is ClauseState.SAT:
                return True
            if state is ClauseState.UNSAT:
                return False
            if state is ClauseState.UNKNOWN:
                return None