"""Literals over 0-indexed propositional variables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

UNSET_THRESHOLD = 2


def is_unset_value(value: int) -> bool:
    """Return True if an assignment value means "not yet assigned"."""
    return value >= UNSET_THRESHOLD


@dataclass(frozen=True)
class Lit:
    """A literal: a variable index and a polarity (True for positive)."""

    idx: int
    polarity: bool

    def __post_init__(self) -> None:
        if self.idx < 0:
            raise ValueError(f"literal index must be non-negative, got {self.idx}")

    @classmethod
    def from_dimacs(cls, value: int) -> Lit:
        """Build a literal from a 1-indexed signed DIMACS integer."""
        if value == 0:
            raise ValueError("0 is not a literal in DIMACS notation")
        return cls(abs(value) - 1, value > 0)

    def to_dimacs(self) -> int:
        """Return the 1-indexed signed DIMACS integer for this literal."""
        number = self.idx + 1
        return number if self.polarity else -number

    def in_range(self, n: int) -> bool:
        """Return True if the variable index is below ``n``."""
        return self.idx < n

    def is_sat(self, values: Sequence[int]) -> bool:
        """Return True if the literal is true under ``values``."""
        return values[self.idx] == (1 if self.polarity else 0)

    def is_unsat(self, values: Sequence[int]) -> bool:
        """Return True if the literal is false under ``values``."""
        return values[self.idx] == (0 if self.polarity else 1)

    def is_unset(self, values: Sequence[int]) -> bool:
        """Return True if the literal's variable is unassigned in ``values``."""
        return is_unset_value(values[self.idx])

    def is_opposite(self, other: Lit) -> bool:
        """Return True if ``other`` is the negation of this literal."""
        return self.idx == other.idx and self.polarity != other.polarity

    def watch_index(self) -> int:
        """Index of this literal in a two-slots-per-variable watch table."""
        return self.idx * 2 + (0 if self.polarity else 1)

    def negated_watch_index(self) -> int:
        """Watch table index of the negation of this literal."""
        return self.idx * 2 + (1 if self.polarity else 0)