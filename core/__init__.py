# core/__init__.py
# This file is part of Toysat - A Toy SAT Solver
#
# Core module public API for the backtracking search

"""Core components for deciding propositional satisfiability.

The search commits literals one at a time in registry order and explores
both truth values depth first, re-running the formula evaluator at every
node. Uncommitted literals read as False, so a node may already satisfy the
formula before every literal has been decided.

Primary Components:
    Assignment: Frozen/thawed split of truth values, copied on every branch
    BacktrackingSolver: Depth-first search over assignments
    SearchResult: Tagged outcome with the witness assignment
    Outcome: SATISFIED, UNSATISFIABLE or ERROR
    SearchStats: Diagnostic counters threaded through a solve
    SearchTrace: Optional record of every visited search node

Example:
    >>> from core import solve_formula
    >>> str(solve_formula("x & ~x"))
    'Unstatisfied'
"""

from .assignment import Assignment
from .result import Outcome, SearchResult
from .solver import BacktrackingSolver, solve_formula
from .stats import NodeStatus, SearchStats, SearchTrace, TraceNode

__all__ = [
    "Assignment",
    "BacktrackingSolver",
    "solve_formula",
    "Outcome",
    "SearchResult",
    "NodeStatus",
    "SearchStats",
    "SearchTrace",
    "TraceNode",
]

__version__ = "1.0.0"
__description__ = "Backtracking search components for propositional satisfiability"
