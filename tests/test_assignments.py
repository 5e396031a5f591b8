import pytest

from dpllsat.assignments import Assignments, bool_to_assigned, flip_value
from dpllsat.clause import Clause, ClauseState
from dpllsat.decision import Decisions
from dpllsat.formula import Formula
from dpllsat.lit import Lit, is_unset_value


def clause(*nums):
    return Clause([Lit.from_dimacs(n) for n in nums])


def formula(num_vars, *clauses):
    return Formula([clause(*c) for c in clauses], num_vars)


def test_bool_to_assigned():
    assert bool_to_assigned(True) == 1
    assert bool_to_assigned(False) == 0


@pytest.mark.parametrize("value", [0, 1, 2, 3])
def test_flip_value_is_involution(value):
    assert flip_value(flip_value(value)) == value


def test_flip_value_swaps_assigned_and_keeps_unset():
    assert flip_value(0) == 1
    assert flip_value(1) == 0
    assert flip_value(2) == 2


def test_for_formula_all_unset():
    f = formula(4, [1, 2])
    a = Assignments.for_formula(f)
    assert len(a) == f.num_vars
    assert all(is_unset_value(v) for v in a.values)
    assert a.next_decision == 0
    assert not a.is_complete() or len(a) == 0


def test_copy_is_independent():
    a = Assignments([0, 2, 1], 1)
    b = a.copy()
    b.values[1] = 1
    assert a.values == [0, 2, 1]
    assert b.next_decision == a.next_decision


def test_is_complete():
    assert Assignments([0, 1, 1]).is_complete()
    assert not Assignments([0, 2, 1]).is_complete()


def test_is_compatible():
    partial = Assignments([1, 2, 0])
    assert partial.is_compatible(Assignments([1, 0, 0]))
    assert partial.is_compatible(Assignments([1, 1, 0]))
    assert not partial.is_compatible(Assignments([0, 1, 0]))
    assert not partial.is_compatible(Assignments([1, 1]))


def test_find_unassigned_follows_order():
    a = Assignments([2, 2, 2])
    d = Decisions([2, 0, 1])
    first = a.find_unassigned(d)
    assert first == d.lit_order[0]
    assert a.next_decision == 1
    a.values[first] = 1
    second = a.find_unassigned(d)
    assert second == d.lit_order[1]


def test_find_unassigned_skips_assigned():
    a = Assignments([2, 1, 0])
    d = Decisions([1, 2, 0])
    assert a.find_unassigned(d) == 0
    assert is_unset_value(a.values[0])


def test_find_unassigned_falls_back_to_scan():
    a = Assignments([1, 2, 0], 3)
    d = Decisions([0, 1, 2])
    assert a.find_unassigned(d) == 1


def test_find_unassigned_complete_raises():
    a = Assignments([1, 0])
    with pytest.raises(ValueError):
        a.find_unassigned(Decisions([0, 1]))


def test_unit_prop_once_assigns_unit_literal():
    f = formula(2, [1, -2])
    a = Assignments([0, 2])
    assert a.unit_prop_once(0, f) is ClauseState.UNIT
    assert a.values[1] == bool_to_assigned(False)
    assert f.clauses[0].is_sat(a.values)


def test_unit_prop_once_other_states_leave_values():
    f = formula(2, [1, 2], [1, -2])
    a = Assignments([2, 2])
    before = list(a.values)
    assert a.unit_prop_once(0, f) is ClauseState.UNKNOWN
    assert a.values == before
    sat = Assignments([1, 2])
    assert sat.unit_prop_once(0, f) is ClauseState.SAT
    unsat = Assignments([0, 0])
    assert unsat.unit_prop_once(0, f) is ClauseState.UNSAT


def test_unit_propagate_returns_unsat_on_conflict():
    f = formula(2, [1], [-1])
    a = Assignments.for_formula(f)
    assert a.unit_propagate(f) is ClauseState.UNSAT


def test_unit_propagate_unknown_keeps_compatible():
    f = formula(3, [1, 2], [2, 3])
    a = Assignments.for_formula(f)
    original = a.copy()
    assert a.unit_propagate(f) is ClauseState.UNKNOWN
    assert original.is_compatible(a)


def test_do_unit_propagation_chain_satisfies():
    f = formula(3, [1], [-1, 2], [-2, 3])
    a = Assignments.for_formula(f)
    assert a.do_unit_propagation(f) is True
    assert a.is_complete()
    assert f.is_sat(a.values)


def test_do_unit_propagation_detects_conflict():
    f = formula(2, [1], [-1, 2], [-2])
    a = Assignments.for_formula(f)
    assert a.do_unit_propagation(f) is False
    assert f.is_unsat(a.values)


def test_do_unit_propagation_undecided():
    f = formula(2, [1, 2])
    a = Assignments.for_formula(f)
    assert a.do_unit_propagation(f) is None
    assert not a.is_complete()


def test_complete_assignment_is_unchanged():
    f = formula(2, [1, 2], [-1, 2])
    a = Assignments([0, 1])
    before = a.copy()
    assert a.do_unit_propagation(f) is True
    assert a == before