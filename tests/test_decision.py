import pytest

from dpllsat.clause import Clause
from dpllsat.decision import Decisions, sort_reverse
from dpllsat.formula import Formula
from dpllsat.lit import Lit


def make_formula(clauses, num_vars):
    return Formula([Clause([Lit.from_dimacs(v) for v in c]) for c in clauses], num_vars)


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [(5, 0)],
        [(1, 0), (3, 1), (2, 2)],
        [(4, 0), (4, 1), (0, 2), (7, 3), (4, 4)],
    ],
)
def test_sort_reverse_is_sorted_permutation(pairs):
    result = sort_reverse(pairs)
    assert sorted(result) == sorted(pairs)
    assert all(a[0] >= b[0] for a, b in zip(result, result[1:]))


def test_sort_reverse_does_not_modify_input():
    pairs = [(1, 0), (2, 1)]
    sort_reverse(pairs)
    assert pairs == [(1, 0), (2, 1)]


def test_sort_reverse_swaps_ties_out_of_order():
    assert sort_reverse([(1, 0), (1, 1), (2, 2)]) == [(2, 2), (1, 1), (1, 0)]


def test_decisions_most_frequent_first():
    formula = make_formula([[1, 2], [2], [-2, 3]], 3)
    decisions = Decisions.from_formula(formula)
    assert decisions.lit_order == [1, 0, 2]


def test_decisions_is_permutation_ordered_by_count():
    formula = make_formula([[1, -4], [4, 2], [-4, 3, 1], [5]], 5)
    decisions = Decisions.from_formula(formula)
    assert sorted(decisions.lit_order) == list(range(formula.num_vars))
    counts = [
        sum(1 for clause in formula.clauses for lit in clause if lit.idx == var)
        for var in decisions.lit_order
    ]
    assert counts == sorted(counts, reverse=True)


def test_decisions_include_unused_variables():
    formula = make_formula([[1]], 4)
    decisions = Decisions.from_formula(formula)
    assert decisions.lit_order[0] == 0
    assert sorted(decisions.lit_order) == list(range(4))


def test_decisions_empty_formula():
    assert Decisions.from_formula(Formula([], 0)).lit_order == []