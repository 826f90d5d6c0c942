# utils/tree_visualizer.py
# This file is part of Toysat - A Toy SAT Solver
#
# Graphviz rendering of an explored search tree

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from graphviz import Digraph, ExecutableNotFound
from utils.logger import get_logger

if TYPE_CHECKING:
    from core.result import SearchResult
    from core.stats import SearchTrace

logger = get_logger(__name__)

_STATUS_COLORS = {
    "satisfied": "palegreen",
    "branched": "lightgrey",
    "dead end": "lightcoral",
    "error": "orange",
}


def build_search_tree(
    trace: "SearchTrace", result: Optional["SearchResult"] = None, title: str = ""
) -> Digraph:
    """
    Build a Graphviz digraph of the visited search nodes.

    Nodes are labelled with the literal committed on entry and coloured by
    what the search did there. Edges run from a branching node to its True
    and False children. When a result is given it is shown as a box linked
    to the root.

    Args:
        trace: Recorded search nodes.
        result: Optional final result for the summary node.
        title: Optional graph label, typically the formula text.
    """
    dot = Digraph(comment=title or "Search tree")
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")
    if title:
        dot.attr(label=title, labelloc="t", fontsize="12")

    for node in trace.nodes:
        dot.node(
            f"N{node.node_id}",
            f"{node.label}\n({node.status.value})",
            shape="ellipse",
            style="filled",
            fillcolor=_STATUS_COLORS.get(node.status.value, "white"),
        )
        if node.parent_id is not None:
            dot.edge(
                f"N{node.parent_id}",
                f"N{node.node_id}",
                label="T" if node.value else "F",
            )

    if result is not None and trace.nodes:
        dot.node("RESULT", result.to_line(), shape="box", style="filled", fillcolor="white")
        dot.edge("RESULT", "N0", style="dotted", arrowhead="none")

    return dot


def save_search_tree(
    trace: "SearchTrace",
    path: str,
    result: Optional["SearchResult"] = None,
    title: str = "",
    fmt: Optional[str] = None,
) -> Path:
    """
    Write the search tree to ``path``.

    Without ``fmt`` the DOT source is saved as is. With ``fmt`` (e.g. "png",
    "svg") the Graphviz executables render the image next to the source; a
    missing installation is logged and the DOT source is kept.

    Returns:
        Path of the file written.
    """
    dot = build_search_tree(trace, result, title)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    saved = Path(dot.save(filename=target.name, directory=str(target.parent)))
    logger.info(f"Search tree saved to {saved}")

    if fmt is None:
        return saved

    try:
        rendered = dot.render(filename=target.name, directory=str(target.parent), format=fmt)
    except ExecutableNotFound as e:
        logger.warning(f"Graphviz executables not found, kept DOT source only: {e}")
        return saved

    logger.info(f"Search tree rendered to {rendered}")
    return Path(rendered)
