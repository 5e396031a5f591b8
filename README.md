# dpllsat

A compact SAT solver built on the DPLL procedure: unit propagation to a
fixed point, a static decision order that branches on the most frequently
occurring variables first (trying true before false), and chronological
backtracking. It reads problems in the DIMACS CNF format and answers
whether they are satisfiable.

Alongside the solver the package carries:

- a DIMACS CNF reader (`dpllsat.parser`),
- a flat clause store addressed by clause references (`dpllsat.clause_db`),
- an exhaustive checker that tries every complete assignment
  (`dpllsat.brute_force`), useful for cross-checking small instances.

No third-party libraries are needed; Python 3.10 or later is enough.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Solve a CNF file:

```
dpllsat --file problem.cnf
```

(`-f` is the short form of `--file`, which is required.) The command
reports progress on comment lines starting with `c` and prints its verdict
on a final line:

```
c Reading file 'problem.cnf'
c Parsed formula with 91 clauses and 20 literals
s SATISFIABLE
```

or `s UNSATISFIABLE`. If the file cannot be opened or is malformed, the
parser's message is printed on a `c` line instead, for example
`c Parser errored with message: File not found!`. The exit status is 0 in
every one of these cases.

## Input format

DIMACS CNF:

```
c a comment
p cnf 3 2
1 -3 0
2 3 -1 0
```

- Tokens are separated by spaces; empty lines are ignored.
- Lines starting with `c` are comments.
- The `p` line gives the number of variables as its third token; only one
  `p` line is allowed. Without a `p` line the variable count is 0, and the
  solver widens it to cover every literal that occurs.
- Every clause is a list of non-zero integers ended by `0`; a clause may
  span several lines.
- A line starting with `%` ends the input (the SATLIB convention).
- A clause left without its closing `0`, a token that is not an integer,
  or a second `p` line raises `dpllsat.parser.ParseError`.

## Library use

```python
from dpllsat.parser import ParseError, parse_cnf, parse_cnf_lines, preproc_and_solve

clauses, num_literals = parse_cnf("problem.cnf")
print(preproc_and_solve(clauses, num_literals))   # True or False

clauses, num_literals = parse_cnf_lines([
    "p cnf 2 3",
    "1 2 0",
    "-1 0",
    "-2 0",
])
print(preproc_and_solve(clauses, num_literals))   # False

try:
    parse_cnf_lines(["p cnf 2 1", "1 2"])
except ParseError as err:
    print(err)   # Error in input file - last clause not terminated
```

`preproc_and_solve` returns `False` straight away if any clause is empty.

Lower-level pieces are available for building formulas directly:

- `dpllsat.lit.Lit` — a 0-indexed variable and a polarity, with
  `Lit.from_dimacs` and `to_dimacs` for the signed 1-indexed notation.
- `dpllsat.clause.Clause` and `ClauseState` (`SAT`, `UNSAT`, `UNIT`,
  `UNKNOWN`).
- `dpllsat.formula.Formula`, `Status` and `SatResult`.
- `dpllsat.assignments.Assignments` — partial assignments and unit
  propagation.
- `dpllsat.decision.Decisions` — the occurrence-count decision order.
- `dpllsat.solver.solve`, which returns a `SatResult` whose `status` is
  `Status.SAT` or `Status.UNSAT`, and `dpllsat.solver.dpll` for the search
  itself.

```python
from dpllsat.clause import Clause
from dpllsat.formula import Formula, Status
from dpllsat.lit import Lit
from dpllsat.solver import solve

formula = Formula([Clause([Lit.from_dimacs(1), Lit.from_dimacs(-2)])], 2)
print(solve(formula).status is Status.SAT)   # True
```

### Clause store

`dpllsat.clause_db.ClauseManager` keeps original and learnt clauses in one
`ClauseAllocator` buffer. Literals are `PackedLit` codes (`2 * index` for a
positive literal, `2 * index + 1` for a negative one); each clause is
stored behind a one-entry length header, and its reference is the buffer
position of that header.

```python
from dpllsat.clause_db import ClauseManager, PackedLit

manager = ClauseManager(num_vars=3)
cref = manager.add_original_clause([PackedLit.from_parts(0, True), PackedLit.from_parts(2, False)])
print(cref, [lit.code for lit in manager.get_clause(cref)])   # 0 [0, 5]
```

Adding an empty clause or a literal whose variable is out of range raises
`ValueError`.

### Exhaustive checker

`dpllsat.brute_force.solve_exhaustive` takes an `ExhaustiveFormula` of
`PackedLit` clauses and tries every complete assignment. Its running time
doubles with each variable, so it suits only small formulas.

## Assignment values

Variable values are stored as small integers: `1` for true, `0` for false,
and any value of `2` or more for a variable not yet assigned.

## What it does not do

- The solver reports only satisfiable or unsatisfiable; it does not return
  a satisfying assignment (the `assignment` of a SAT result from `solve`
  is empty).
- There is no clause learning, restarting or watched-literal propagation:
  each propagation pass scans every clause. The clause store in
  `dpllsat.clause_db` is a standalone structure and is not used by the
  solver.
- The command line takes only a file name; it has no options for
  timeouts, proof output or printing models.