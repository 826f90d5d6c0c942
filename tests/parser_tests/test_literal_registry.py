# tests/parser_tests/test_literal_registry.py
# This file is part of Toysat - A Toy SAT Solver
#
# Test suite for literal registry construction and resolution

import pytest
from parser import parse, ParseError, NoLiteralsError
from parser.lexer import tokenize
from parser.registry import LiteralRegistry, build_registry


class TestLiteralRegistry:
    """Test cases for first-occurrence ordering and index resolution."""

    def test_first_occurrence_order(self):
        """Test literals are ordered by their first appearance."""
        registry = LiteralRegistry.from_tokens(tokenize("c & a | c & (b | a)"))
        assert registry.names == ("c", "a", "b")
        assert [registry.index_of(n) for n in ("c", "a", "b")] == [0, 1, 2]

    def test_duplicates_collapse(self):
        """Test repeated literals are registered once."""
        registry = LiteralRegistry.from_tokens(tokenize("x & ~x & x"))
        assert len(registry) == 1
        assert list(registry) == ["x"]

    def test_names_are_case_sensitive(self):
        """Test literal names are compared verbatim."""
        registry = LiteralRegistry.from_tokens(tokenize("a & A"))
        assert registry.names == ("a", "A")

    def test_resolution_assigns_indices(self):
        """Test every literal token carries the index of its name."""
        registry, resolved = build_registry(tokenize("b & a & b"))

        literal_tokens = [tok for tok in resolved if tok.is_literal]
        assert [(tok.text, tok.index) for tok in literal_tokens] == [
            ("b", 0),
            ("a", 1),
            ("b", 0),
        ]
        for tok in literal_tokens:
            assert registry.names[tok.index] == tok.text

    def test_resolution_leaves_other_tokens_untouched(self):
        """Test operator tokens come back unchanged and unresolved."""
        tokens = tokenize("~(a)")
        _, resolved = build_registry(tokens)

        for original, new in zip(tokens, resolved):
            if not original.is_literal:
                assert new == original
                assert new.index is None

    def test_resolution_does_not_mutate_input(self):
        """Test the original tokens stay unresolved."""
        tokens = tokenize("a | b")
        build_registry(tokens)
        assert all(tok.index is None for tok in tokens)

    def test_resolve_unknown_name_raises(self):
        """Test resolving against a registry without the name fails."""
        registry = LiteralRegistry(["a"])
        with pytest.raises(KeyError):
            registry.resolve(tokenize("a & b"))

    def test_index_of_unknown_name_raises(self):
        registry = LiteralRegistry(["a"])
        assert "a" in registry
        assert "b" not in registry
        with pytest.raises(KeyError):
            registry.index_of("b")

    def test_equality_follows_order(self):
        assert LiteralRegistry(["a", "b"]) == LiteralRegistry(["a", "b", "a"])
        assert LiteralRegistry(["a", "b"]) != LiteralRegistry(["b", "a"])

    def test_str_lists_names(self):
        assert str(LiteralRegistry(["mike", "sally", "peter"])) == "mike sally peter"


class TestParsePipeline:
    """Test cases for the parse entry point."""

    def test_parse_builds_formula(self):
        formula = parse("a & ~b")
        assert formula.source == "a & ~b"
        assert formula.registry.names == ("a", "b")
        assert formula.literal_count == 2
        assert formula.tokens[-1].is_eof

    def test_parse_rejects_empty_text(self):
        with pytest.raises(ParseError, match="Contents is empty"):
            parse("")

    def test_parse_rejects_whitespace_only(self):
        with pytest.raises(ParseError, match="No tokens found"):
            parse("  \n\t ")

    @pytest.mark.parametrize("text", ["()", "@", "~ & |"])
    def test_parse_rejects_formula_without_literals(self, text):
        with pytest.raises(NoLiteralsError, match="There are no literals"):
            parse(text)

    def test_no_literals_error_is_a_parse_error(self):
        assert issubclass(NoLiteralsError, ParseError)
