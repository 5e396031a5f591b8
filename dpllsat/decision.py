"""Static variable ordering for branching decisions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from dpllsat.formula import Formula


def sort_reverse(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the pairs sorted by first element, largest first.

    Selection sort: each position takes the first largest remaining pair, which is
    swapped into place. Ties are therefore not kept in their original order.
    """
    items = list(pairs)
    for i in range(len(items)):
        best = max(range(i, len(items)), key=lambda pos: items[pos][0])
        items[i], items[best] = items[best], items[i]
    return items


@dataclass
class Decisions:
    """Order in which unassigned variables are tried."""

    lit_order: list[int] = field(default_factory=list)

    @classmethod
    def from_formula(cls, formula: Formula) -> Decisions:
        """Order variables by how many clause occurrences they have, most first."""
        counts = Counter(lit.idx for clause in formula.clauses for lit in clause)
        ranked = sort_reverse((counts[var], var) for var in range(formula.num_vars))
        return cls([var for _, var in ranked])