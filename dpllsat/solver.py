"""DPLL search with unit propagation and a static decision order."""

from __future__ import annotations

from dpllsat.assignments import Assignments
from dpllsat.decision import Decisions
from dpllsat.formula import Formula, SatResult, Status


def dpll(formula: Formula, assignments: Assignments, decisions: Decisions) -> bool:
    """Return True if some extension of ``assignments`` satisfies ``formula``.

    Each branch tries the chosen variable true before false. ``assignments``
    is used as working state and may be modified.
    """
    pending = [assignments]
    while pending:
        current = pending.pop()
        outcome = current.do_unit_propagation(formula)
        if outcome is True:
            return True
        if outcome is False:
            continue
        var = current.find_unassigned(decisions)
        negative = current.copy()
        current.values[var] = 1
        negative.values[var] = 0
        pending.append(negative)
        pending.append(current)
    return False


def solve(formula: Formula) -> SatResult:
    """Decide satisfiability of ``formula``; the result is SAT or UNSAT."""
    trivial = formula.check_and_establish_invariant()
    if trivial.status is not Status.UNKNOWN:
        return trivial
    assignments = Assignments.for_formula(formula)
    decisions = Decisions.from_formula(formula)
    if dpll(formula, assignments, decisions):
        return SatResult.sat()
    return SatResult.unsat()