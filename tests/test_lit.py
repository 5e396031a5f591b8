import pytest

from dpllsat.lit import Lit, is_unset_value


@pytest.mark.parametrize("value", [1, -1, 7, -7, 250, -250])
def test_dimacs_round_trip(value):
    assert Lit.from_dimacs(value).to_dimacs() == value


@pytest.mark.parametrize("value", [1, -3, 42, -100])
def test_from_dimacs_index_and_polarity(value):
    lit = Lit.from_dimacs(value)
    assert lit.idx == abs(value) - 1
    assert lit.polarity == (value > 0)


def test_from_dimacs_zero_rejected():
    with pytest.raises(ValueError):
        Lit.from_dimacs(0)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        Lit(-1, True)


def test_first_variable_is_index_zero():
    assert Lit.from_dimacs(-1) == Lit(0, False)


def test_in_range():
    lit = Lit(3, True)
    assert lit.in_range(4)
    assert not lit.in_range(3)


def test_unset_values():
    assert is_unset_value(2)
    assert is_unset_value(3)
    assert not is_unset_value(0)
    assert not is_unset_value(1)


def test_positive_literal_states():
    lit = Lit(0, True)
    assert lit.is_sat([1])
    assert not lit.is_unsat([1])
    assert lit.is_unsat([0])
    assert not lit.is_sat([0])
    assert lit.is_unset([2])
    assert not lit.is_sat([2]) and not lit.is_unsat([2])


def test_negative_literal_states():
    lit = Lit(1, False)
    assert lit.is_sat([2, 0])
    assert lit.is_unsat([2, 1])
    assert lit.is_unset([0, 2])


def test_is_opposite():
    a = Lit(4, True)
    assert a.is_opposite(Lit(4, False))
    assert not a.is_opposite(Lit(4, True))
    assert not a.is_opposite(Lit(5, False))


@pytest.mark.parametrize("lit", [Lit(0, True), Lit(0, False), Lit(9, True), Lit(9, False)])
def test_watch_indices_pair_up(lit):
    assert lit.watch_index() // 2 == lit.idx
    assert lit.negated_watch_index() // 2 == lit.idx
    assert lit.watch_index() ^ 1 == lit.negated_watch_index()
    negation = Lit(lit.idx, not lit.polarity)
    assert negation.watch_index() == lit.negated_watch_index()


def test_positive_watch_index_is_even():
    assert Lit(5, True).watch_index() % 2 == 0