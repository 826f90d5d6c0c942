# tests/parser_tests/test_lexer_tokens.py
# This file is part of Toysat - A Toy SAT Solver
#
# Test suite for formula tokenization

"""Test suite for the formula lexer.

Verifies token classification, whitespace handling, identifier capture and
the conversion of unknown characters into UNKNOWN tokens instead of errors.
"""

import pytest
from parser.lexer import tokenize, tokens_to_string
from parser.tokens import Token, TokenType
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula tokenization."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[TokenType]:
        """Extract token types from input text, without the EOF marker."""
        self.logger.debug(f"Tokenizing: '{text}'")
        tokens = tokenize(text)
        assert tokens[-1].type is TokenType.EOF
        return [tok.type for tok in tokens[:-1]]

    VALID_TOKENIZATION_CASES = [
        ("a", [TokenType.LITERAL]),
        ("a & b", [TokenType.LITERAL, TokenType.AND, TokenType.LITERAL]),
        ("a|b", [TokenType.LITERAL, TokenType.OR, TokenType.LITERAL]),
        ("~a", [TokenType.NOT, TokenType.LITERAL]),
        ("()", [TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN]),
        (
            "~(mike & sally) | ~peter100",
            [
                TokenType.NOT,
                TokenType.OPEN_PAREN,
                TokenType.LITERAL,
                TokenType.AND,
                TokenType.LITERAL,
                TokenType.CLOSE_PAREN,
                TokenType.OR,
                TokenType.NOT,
                TokenType.LITERAL,
            ],
        ),
        ("&|~()", [
            TokenType.AND,
            TokenType.OR,
            TokenType.NOT,
            TokenType.OPEN_PAREN,
            TokenType.CLOSE_PAREN,
        ]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer classifies operators, brackets and literals."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_identifier_capture(self):
        """Test identifiers are one letter followed by letters and digits."""
        tokens = tokenize("peter100 x1y2 Z")
        names = [tok.text for tok in tokens if tok.is_literal]
        assert names == ["peter100", "x1y2", "Z"]

    def test_digit_cannot_start_identifier(self):
        """Test a leading digit is an unknown character, not part of a literal."""
        tokens = tokenize("1a")
        assert [tok.type for tok in tokens] == [
            TokenType.UNKNOWN,
            TokenType.LITERAL,
            TokenType.EOF,
        ]
        assert tokens[0].text == "1"
        assert tokens[1].text == "a"

    def test_underscore_is_unknown(self):
        """Test underscores are not identifier characters."""
        tokens = tokenize("a_b")
        assert [tok.type for tok in tokens[:-1]] == [
            TokenType.LITERAL,
            TokenType.UNKNOWN,
            TokenType.LITERAL,
        ]

    UNKNOWN_CHARACTERS = ["@", "#", "$", "!", "^", "*", "=", "+", "-", ";", ",", "[", "?"]

    @pytest.mark.parametrize("unknown_char", UNKNOWN_CHARACTERS)
    def test_unknown_character_never_fails(self, unknown_char):
        """Test unrecognized characters become UNKNOWN tokens instead of raising."""
        tokens = tokenize(f"p & {unknown_char} q")

        types = [tok.type for tok in tokens]
        assert types == [
            TokenType.LITERAL,
            TokenType.AND,
            TokenType.UNKNOWN,
            TokenType.LITERAL,
            TokenType.EOF,
        ]
        assert tokens[2].text == unknown_char

    def test_whitespace_handling(self):
        """Test every kind of whitespace is skipped."""
        whitespace_cases = [
            ("  a  ", [TokenType.LITERAL]),
            ("\ta\r\n&\nb\t", [TokenType.LITERAL, TokenType.AND, TokenType.LITERAL]),
            ("a\f|\vb", [TokenType.LITERAL, TokenType.OR, TokenType.LITERAL]),
        ]

        for input_text, expected in whitespace_cases:
            actual = self._tokenize_to_types(input_text)
            assert actual == expected, f"Whitespace handling failed for: {input_text!r}"

    def test_whitespace_separates_identifiers(self):
        """Test whitespace between letters yields two literals."""
        tokens = tokenize("ab cd")
        assert [tok.text for tok in tokens if tok.is_literal] == ["ab", "cd"]

    def test_empty_input(self):
        """Test empty input produces only the EOF marker."""
        assert tokenize("") == (Token(TokenType.EOF, "", 0),)
        assert self._tokenize_to_types("   \n ") == []

    def test_positions_are_recorded(self):
        """Test each token records its offset in the source text."""
        tokens = tokenize("ab & ~c")
        assert [tok.position for tok in tokens] == [0, 3, 5, 6, 7]

    def test_tokenization_is_pure(self):
        """Test tokenizing the same text twice yields equal sequences."""
        assert tokenize("a & (b | ~c)") == tokenize("a & (b | ~c)")

    def test_tokens_are_immutable(self):
        """Test tokens cannot be modified after creation."""
        token = tokenize("a")[0]
        with pytest.raises(Exception):
            token.text = "b"

    def test_tokens_to_string(self):
        """Test tokens render space separated without the EOF marker."""
        assert tokens_to_string(tokenize("~(a&b)|c@")) == "~ ( a & b ) | c Unknown"
