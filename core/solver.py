# core/solver.py
# This file is part of Toysat - A Toy SAT Solver
#
# Backtracking search over truth assignments

"""Depth-first search for a satisfying assignment.

The solver repeatedly runs the evaluator over the same token sequence under
different assignments. Each search node holds an assignment whose frozen
prefix is fixed and whose thawed suffix reads as False:

    Evaluate the node:
      - error           -> stop, report the error
      - true            -> stop, the node's assignment is the witness
      - false, all set  -> dead end, backtrack
      - false otherwise -> branch on the first thawed literal,
                           trying True before False

Pending nodes live on an explicit stack rather than the interpreter's call
stack. The False child is pushed beneath the True child, so nodes are visited
in exactly the order of the recursive formulation, and the first satisfied
node ends the search without touching the siblings still on the stack.

The search is a plain enumeration of the assignment space: for n literals
it visits at most 2^n fully committed leaves.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from parser import parse
from parser.evaluator import Evaluator, EvalResult
from parser.formula import Formula
from utils.logger import get_logger
from .assignment import Assignment
from .result import SearchResult
from .stats import NodeStatus, SearchStats, SearchTrace


class BacktrackingSolver:
    """Exhaustive depth-first satisfiability search for one formula.

    Attributes:
        formula: Resolved tokens and literal registry, read-only
    """

    def __init__(self, formula: Formula, evaluator: Optional[Evaluator] = None):
        self.formula = formula
        self._evaluator = evaluator or Evaluator()

    def check_syntax(self, stats: Optional[SearchStats] = None) -> EvalResult:
        """Evaluate once with every literal thawed to surface grammar errors.

        The boolean value is irrelevant to the search and is discarded by
        ``solve``.
        """
        initial = Assignment.initial(self.formula.literal_count)
        return self._evaluator.evaluate(self.formula.tokens, initial, stats)

    def search(
        self,
        stats: Optional[SearchStats] = None,
        trace: Optional[SearchTrace] = None,
    ) -> SearchResult:
        """Run the depth-first search.

        Args:
            stats: Optional counters updated in place
            trace: Optional recorder for every visited node

        Returns:
            SATISFIED with the first witness found, UNSATISFIABLE when the
            space is exhausted, or ERROR when evaluation fails
        """
        logger = get_logger()
        names = self.formula.registry.names
        tokens = self.formula.tokens
        verbose = logger.is_debug_enabled()

        logger.search_start(self.formula.source, names)

        pending: List[Tuple[Assignment, Optional[int]]] = [
            (Assignment.initial(len(names)), None)
        ]

        while pending:
            assignment, parent_id = pending.pop()
            result = self._evaluator.evaluate(tokens, assignment, stats)
            depth = assignment.frozen_count

            if result.is_error:
                status = NodeStatus.ERROR
            elif result.value:
                status = NodeStatus.SATISFIED
            elif assignment.is_fully_frozen:
                status = NodeStatus.DEAD_END
            else:
                status = NodeStatus.BRANCHED

            if stats is not None:
                stats.record_node(depth, assignment.is_fully_frozen)

            node_id = None
            if trace is not None:
                literal = names[depth - 1] if depth else None
                value = assignment[depth - 1] if depth else None
                node_id = trace.add(parent_id, literal, value, depth, status).node_id

            if verbose:
                logger.node_visited(depth, str(assignment), str(result))

            if status is NodeStatus.ERROR:
                logger.search_finished("error")
                return SearchResult.error(result.error)

            if status is NodeStatus.SATISFIED:
                witness = assignment.pairs(names)
                logger.search_finished("satisfied")
                return SearchResult.satisfied(witness)

            if status is NodeStatus.DEAD_END:
                if verbose:
                    logger.dead_end(str(assignment))
                continue

            if verbose:
                logger.branch(names[assignment.next_index], depth)
            pending.append((assignment.commit(False), node_id))
            pending.append((assignment.commit(True), node_id))

        logger.search_finished("unsatisfiable")
        return SearchResult.unsatisfiable()

    def solve(
        self,
        stats: Optional[SearchStats] = None,
        trace: Optional[SearchTrace] = None,
    ) -> SearchResult:
        """Check syntax once, then search.

        A syntax error is reported as an ERROR result without searching.
        """
        check = self.check_syntax(stats)
        if check.is_error:
            get_logger().syntax_error(check.error)
            return SearchResult.error(check.error)
        return self.search(stats, trace)


def solve_formula(
    text: str,
    stats: Optional[SearchStats] = None,
    trace: Optional[SearchTrace] = None,
) -> SearchResult:
    """Tokenize, resolve and solve formula text.

    Args:
        text: Formula text
        stats: Optional counters updated in place
        trace: Optional recorder for every visited node

    Returns:
        The search result; grammar errors come back as ERROR results

    Raises:
        ParseError: Text is empty or contains no tokens
        NoLiteralsError: Formula has no literals to solve for

    Example:
        >>> str(solve_formula("a & ~b"))
        'Satisfied with a=True b=False'
    """
    formula = parse(text)
    return BacktrackingSolver(formula).solve(stats, trace)
