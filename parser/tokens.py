# parser/tokens.py
# This file is part of Toysat - A Toy SAT Solver
#
# Token types and immutable token records for propositional formulas

"""Token records produced by the formula lexer.

Tokens are immutable. Resolving a literal against the literal registry
produces a new token carrying the literal's index rather than mutating the
original one.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional


class TokenType(Enum):
    """Tag of a lexical token."""

    AND = auto()
    OR = auto()
    NOT = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    LITERAL = auto()
    UNKNOWN = auto()
    EOF = auto()


_DISPLAY = {
    TokenType.AND: "&",
    TokenType.OR: "|",
    TokenType.NOT: "~",
    TokenType.OPEN_PAREN: "(",
    TokenType.CLOSE_PAREN: ")",
    TokenType.UNKNOWN: "Unknown",
    TokenType.EOF: "Eof",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical token.

    Attributes:
        type: Token tag
        text: Source text of the token (empty for EOF)
        position: Offset of the token in the source text
        index: Registry index for resolved LITERAL tokens, None otherwise
    """

    type: TokenType
    text: str = ""
    position: int = 0
    index: Optional[int] = None

    @property
    def is_literal(self) -> bool:
        return self.type is TokenType.LITERAL

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    def with_index(self, index: int) -> Token:
        """Return a copy of this token resolved to a registry index."""
        return replace(self, index=index)

    def __str__(self) -> str:
        if self.type is TokenType.LITERAL:
            return self.text
        return _DISPLAY[self.type]
