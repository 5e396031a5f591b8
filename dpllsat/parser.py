"""DIMACS CNF reading and a convenience entry point to the solver."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from dpllsat.clause import Clause
from dpllsat.formula import Formula, Status
from dpllsat.lit import Lit
from dpllsat.solver import solve

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class ParseError(ValueError):
    """Raised when a CNF input cannot be read or is malformed."""


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _parse_literal(token: str) -> int | None:
    if not _SIGNED_INT.fullmatch(token):
        return None
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


def _parse_count(token: str) -> int | None:
    if not _UNSIGNED_INT.fullmatch(token):
        return None
    return int(token)


def parse_cnf_lines(lines: Iterable[str]) -> tuple[list[list[int]], int]:
    """Parse DIMACS CNF text given as lines.

    Returns the clauses as lists of signed 1-indexed literals and the
    variable count from the ``p`` line (0 if there is none). Tokens are
    separated by spaces; a line starting with ``%`` ends the input.
    """
    num_literals = 0
    num_lits_set = False
    clauses: list[list[int]] = []
    current: list[int] = []
    for line_number, raw in enumerate(lines, start=1):
        tokens = [token for token in _strip_newline(raw).split(" ") if token]
        if not tokens:
            continue
        head = tokens[0]
        if head == "c":
            continue
        if head == "p":
            count = _parse_count(tokens[2]) if len(tokens) > 2 else None
            if count is None:
                raise ParseError("Error in input file")
            if num_lits_set:
                raise ParseError("Error in input file - multiple p lines")
            num_lits_set = True
            num_literals = count
            continue
        if head == "%":
            break
        for token in tokens:
            value = _parse_literal(token)
            if value is None:
                raise ParseError(f"Error in input file on line {line_number}")
            if value == 0:
                clauses.append(current)
                current = []
            else:
                current.append(value)
    if current:
        raise ParseError("Error in input file - last clause not terminated")
    return clauses, num_literals


def _decoded_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for raw in raw_lines:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            # Unreadable lines are skipped but still counted.
            yield ""


def parse_cnf(path: str | PathLike[str]) -> tuple[list[list[int]], int]:
    """Parse the DIMACS CNF file at ``path``."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ParseError("File not found!") from exc
    with handle:
        return parse_cnf_lines(_decoded_lines(handle))


def preproc_and_solve(clauses: Iterable[Sequence[int]], num_literals: int) -> bool:
    """Build a formula from 1-indexed signed clauses and decide it.

    Returns False at once if a clause is empty. Raises ValueError if a
    literal is 0.
    """
    formula = Formula([], num_literals)
    for clause in clauses:
        lits = []
        for value in clause:
            if value == 0:
                raise ValueError("0 is not a literal in DIMACS notation")
            lits.append(Lit.from_dimacs(value))
        if not lits:
            return False
        formula.clauses.append(Clause(lits))
    result = solve(formula)
    if result.status is Status.SAT:
        return True
    if result.status is Status.UNSAT:
        return False
    raise RuntimeError("solver returned an undecided result")