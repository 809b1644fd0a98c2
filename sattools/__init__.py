"""Bitsets, clauses, CNF models and statistics, and DIMACS/DRAT output for SAT work."""

__version__ = "0.1.0"