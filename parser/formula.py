# parser/formula.py

"""
Encapsulates a tokenized formula ready for evaluation.

After tokenization and literal resolution the token sequence and the
literal registry stay read-only for the lifetime of the formula.
"""

from dataclasses import dataclass
from typing import Tuple

from .registry import LiteralRegistry
from .tokens import Token


@dataclass(frozen=True)
class Formula:
    """
    A formula's resolved token sequence and its literal registry.

    Attributes:
        source: Original formula text.
        tokens: Resolved tokens, terminated by an EOF token.
        registry: Distinct literals in first-occurrence order.
    """
    source: str
    tokens: Tuple[Token, ...]
    registry: LiteralRegistry

    @property
    def literal_count(self) -> int:
        return len(self.registry)
