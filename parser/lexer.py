# parser/lexer.py
# This file is part of Toysat - A Toy SAT Solver
#
# Lexical analyzer for propositional formulas using SLY

"""Lexical analyzer for propositional formula strings.

Breaks formula text into a finite sequence of typed tokens terminated by a
single EOF token. Tokenization never fails: characters outside the alphabet
become UNKNOWN tokens and any error is reported later by the evaluator, at
the point where the token breaks a grammar rule.

Supported Tokens:
- Operators: &, |, ~, (, )
- Literals: a letter followed by letters and digits
- Whitespace: ignored during tokenization
"""

from typing import Iterable, Tuple

from sly import Lexer
from utils.logger import get_logger
from .tokens import Token, TokenType


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of token types with a matching rule
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "LITERAL",
        "AND",
        "OR",
        "NOT",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n\f\v"

    AND = r"&"
    OR = r"\|"
    NOT = r"~"
    LPAREN = r"\("
    RPAREN = r"\)"

    LITERAL = r"[a-zA-Z][a-zA-Z0-9]*"

    def error(self, t):
        """Turn an unmatched character into an UNKNOWN token.

        Called by SLY when no rule matches at the current position. The
        offending character is consumed and handed back as a token so that
        tokenization always runs to the end of the input.

        Args:
            t: SLY token whose value holds the remaining input

        Returns:
            The same token retyped as UNKNOWN with a single-character value
        """
        get_logger().debug(f"Unknown character '{t.value[0]}' at position {self.index}")

        t.type = "UNKNOWN"
        t.value = t.value[0]
        self.index += 1
        return t


_TYPE_MAP = {
    "LITERAL": TokenType.LITERAL,
    "AND": TokenType.AND,
    "OR": TokenType.OR,
    "NOT": TokenType.NOT,
    "LPAREN": TokenType.OPEN_PAREN,
    "RPAREN": TokenType.CLOSE_PAREN,
    "UNKNOWN": TokenType.UNKNOWN,
}


def tokenize(text: str) -> Tuple[Token, ...]:
    """Tokenize formula text.

    A fresh lexer is used for every call, so tokenization is a pure function
    of its input.

    Args:
        text: Formula source text

    Returns:
        Tuple of tokens, always ending with exactly one EOF token

    Example:
        >>> [str(t) for t in tokenize("a & ~b")]
        ['a', '&', '~', 'b', 'Eof']
    """
    tokens = [
        Token(_TYPE_MAP[tok.type], tok.value, tok.index)
        for tok in FormulaLexer().tokenize(text)
    ]
    tokens.append(Token(TokenType.EOF, "", len(text)))
    return tuple(tokens)


def tokens_to_string(tokens: Iterable[Token]) -> str:
    """Render tokens space separated, leaving out the EOF marker."""
    return " ".join(str(tok) for tok in tokens if not tok.is_eof)
