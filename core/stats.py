# core/stats.py
# This file is part of Toysat - A Toy SAT Solver
#
# Diagnostic counters and search-tree recording

"""Diagnostics collected while solving.

Both objects are passed into the solver explicitly by the caller. They are
observational only: nothing in the search reads them back, and no limit is
enforced on any counter.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(slots=True)
class SearchStats:
    """Running counters for one solve.

    Attributes:
        evaluations: Evaluator invocations, including the syntax check
        lookups: Literal value reads performed by the evaluator
        nodes: Search nodes visited
        leaves: Visited nodes with every literal committed
        max_depth: Largest number of committed literals on a visited node
        max_nesting: Deepest evaluator frame stack observed
    """

    evaluations: int = 0
    lookups: int = 0
    nodes: int = 0
    leaves: int = 0
    max_depth: int = 0
    max_nesting: int = 0

    def record_node(self, depth: int, is_leaf: bool) -> None:
        self.nodes += 1
        if is_leaf:
            self.leaves += 1
        if depth > self.max_depth:
            self.max_depth = depth

    def summary_lines(self) -> List[str]:
        return [
            f"Number of Evals: {self.evaluations}",
            f"Number of Lookups: {self.lookups}",
            f"Number of Nodes: {self.nodes}",
            f"Max Depth: {self.max_depth}",
        ]


class NodeStatus(Enum):
    """What the search did at a visited node."""

    SATISFIED = "satisfied"
    BRANCHED = "branched"
    DEAD_END = "dead end"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class TraceNode:
    """One visited search node.

    Attributes:
        node_id: Visit order, starting at 0 for the root
        parent_id: Node that branched into this one, None for the root
        literal: Literal committed on entry, None for the root
        value: Value committed on entry, None for the root
        depth: Number of committed literals
        status: Outcome of evaluating the node
    """

    node_id: int
    parent_id: Optional[int]
    literal: Optional[str]
    value: Optional[bool]
    depth: int
    status: NodeStatus

    @property
    def label(self) -> str:
        if self.literal is None:
            return "root"
        return f"{self.literal}={self.value}"


@dataclass
class SearchTrace:
    """Visited search nodes in visit order."""

    nodes: List[TraceNode] = field(default_factory=list)

    def add(
        self,
        parent_id: Optional[int],
        literal: Optional[str],
        value: Optional[bool],
        depth: int,
        status: NodeStatus,
    ) -> TraceNode:
        node = TraceNode(len(self.nodes), parent_id, literal, value, depth, status)
        self.nodes.append(node)
        return node

    def children_of(self, node_id: int) -> List[TraceNode]:
        return [n for n in self.nodes if n.parent_id == node_id]

    def __len__(self) -> int:
        return len(self.nodes)
