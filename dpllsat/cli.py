"""Command line entry point: solve a DIMACS CNF file."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from dpllsat.parser import ParseError, parse_cnf, preproc_and_solve


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpllsat",
        description="A DPLL-based SAT solver.",
    )
    parser.add_argument("-f", "--file", required=True, metavar="FILENAME", help="CNF file to be parsed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the file named on the command line, solve it and print the verdict."""
    args = _build_parser().parse_args(argv)
    filename = args.file
    print(f"c Reading file '{filename}'")
    try:
        clauses, num_literals = parse_cnf(filename)
    except ParseError as exc:
        print(f"c Parser errored with message: {exc}")
        return 0
    print(f"c Parsed formula with {len(clauses)} clauses and {num_literals} literals")
    if preproc_and_solve(clauses, num_literals):
        print("s SATISFIABLE")
    else:
        print("s UNSATISFIABLE")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())