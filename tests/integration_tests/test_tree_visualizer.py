# tests/integration_tests/test_tree_visualizer.py
# This file is part of Toysat - A Toy SAT Solver
#
# Test suite for search tree rendering

"""Tests for the Graphviz search tree.

Only DOT source is inspected, so the Graphviz executables are not needed.
"""

from core import SearchStats, SearchTrace, solve_formula
from utils.tree_visualizer import build_search_tree, save_search_tree


def _solved_trace(formula):
    trace = SearchTrace()
    result = solve_formula(formula, SearchStats(), trace)
    return trace, result


class TestSearchTreeGraph:
    """Test cases for building and saving the search tree graph."""

    def test_every_visited_node_is_drawn(self):
        trace, _ = _solved_trace("x & ~x")
        source = build_search_tree(trace).source

        for node in trace.nodes:
            assert f"N{node.node_id} " in source
        assert "N0 -> N1" in source
        assert "N0 -> N2" in source

    def test_edges_are_labelled_with_branch_value(self):
        trace, _ = _solved_trace("x & ~x")
        source = build_search_tree(trace).source
        assert "label=T" in source
        assert "label=F" in source

    def test_status_colours(self):
        trace, _ = _solved_trace("a & ~b")
        source = build_search_tree(trace).source
        assert "palegreen" in source
        assert "lightgrey" in source

    def test_result_box(self):
        trace, result = _solved_trace("a & ~b")
        source = build_search_tree(trace, result, title="a & ~b").source

        assert "RESULT" in source
        assert "Satisfied with a=True b=False" in source
        assert "RESULT -> N0" in source

    def test_no_result_box_without_nodes(self):
        trace, result = _solved_trace("a & b &")
        assert len(trace) == 0
        assert "RESULT" not in build_search_tree(trace, result).source

    def test_save_writes_dot_source(self, tmp_path):
        trace, result = _solved_trace("a | b")
        target = tmp_path / "out" / "tree.dot"

        saved = save_search_tree(trace, str(target), result=result)

        assert saved == target
        assert "a=True" in target.read_text()
