"""DPLL SAT solving with a DIMACS CNF reader, a flat clause store and an exhaustive checker."""

__version__ = "0.1.0"