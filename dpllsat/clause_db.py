"""A flat clause store addressed by clause references.

Clauses live one after another in a single buffer; each is preceded by a
header entry holding its length. A clause reference is the buffer position
of its header.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

U32_MAX = 2**32 - 1
HEADER_LEN = 1


@dataclass(frozen=True)
class PackedLit:
    """A literal packed into one code: ``2 * index`` if positive, ``2 * index + 1`` if negative."""

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= U32_MAX:
            raise ValueError(f"literal code out of range: {self.code}")

    @classmethod
    def from_parts(cls, index: int, positive: bool) -> PackedLit:
        """Build a literal from a variable index and a polarity."""
        return cls(index * 2 + (0 if positive else 1))

    def index(self) -> int:
        """Return the variable index."""
        return self.code // 2

    def is_positive(self) -> bool:
        """Return True for a positive literal."""
        return self.code % 2 == 0

    def is_sat(self, values: Sequence[int]) -> bool:
        """Return True if the literal is true under ``values``."""
        return values[self.index()] == (1 if self.is_positive() else 0)

    def in_range(self, n: int) -> bool:
        """Return True if the variable index is below ``n``."""
        return self.index() < n


@dataclass
class ClauseAllocator:
    """Buffer holding every clause, each behind a length header."""

    num_vars: int
    buffer: list[PackedLit] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.buffer)

    def add_clause(self, lits: Sequence[PackedLit]) -> int:
        """Append a clause and return its reference.

        Raises ValueError for an empty clause, a literal whose variable is out
        of range, or when the buffer would outgrow 32-bit references.
        """
        lits = list(lits)
        if not lits:
            raise ValueError("cannot add an empty clause")
        if len(self.buffer) + len(lits) + HEADER_LEN > U32_MAX:
            raise ValueError("clause buffer is full")
        for lit in lits:
            if not lit.in_range(self.num_vars):
                raise ValueError(f"literal variable {lit.index()} out of range for {self.num_vars} variables")
        cref = len(self.buffer)
        self.buffer.append(PackedLit(len(lits)))
        self.buffer.extend(lits)
        return cref

    def get_clause(self, cref: int) -> list[PackedLit]:
        """Return the literals of the clause at ``cref``."""
        if not 0 <= cref < len(self.buffer):
            raise IndexError(f"clause reference out of range: {cref}")
        start = cref + HEADER_LEN
        end = start + self.buffer[cref].code
        if end > len(self.buffer):
            raise IndexError(f"invalid clause reference: {cref}")
        return self.buffer[start:end]


@dataclass
class CRefManager:
    """An ordered collection of clause references."""

    num_vars: int
    crefs: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.crefs)

    def __iter__(self) -> Iterator[int]:
        return iter(self.crefs)

    def add_cref(self, cref: int) -> None:
        """Append a clause reference."""
        if cref < 0:
            raise ValueError(f"clause reference must be non-negative, got {cref}")
        self.crefs.append(cref)


class ClauseManager:
    """Original and learnt clauses sharing one allocator."""

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must be non-negative, got {num_vars}")
        self.clause_allocator = ClauseAllocator(num_vars)
        self.original_clauses = CRefManager(num_vars)
        self.learnt_core = CRefManager(num_vars)

    @property
    def num_vars(self) -> int:
        return self.clause_allocator.num_vars

    def add_original_clause(self, lits: Sequence[PackedLit]) -> int:
        """Store a clause of the input formula and return its reference."""
        cref = self.clause_allocator.add_clause(lits)
        self.original_clauses.add_cref(cref)
        return cref

    def learn_clause(self, lits: Sequence[PackedLit]) -> int:
        """Store a clause implied by the original clauses and return its reference."""
        cref = self.clause_allocator.add_clause(lits)
        self.learnt_core.add_cref(cref)
        return cref

    def get_clause(self, cref: int) -> list[PackedLit]:
        """Return the literals of the clause at ``cref``."""
        return self.clause_allocator.get_clause(cref)