# parser/registry.py
# This file is part of Toysat - A Toy SAT Solver
#
# Literal registry: first-occurrence ordering and index resolution

"""Registry of the distinct literals of a formula.

The registry fixes the order of literals (first occurrence in the token
stream) and therefore the branching order of the search. Resolving every
literal token to its registry index once, before any evaluation, lets the
evaluator read a literal's value with a single index dereference instead of
comparing names on every evaluation.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from utils.logger import get_logger
from .tokens import Token


class LiteralRegistry:
    """Ordered set of unique literal names indexed ``0..n-1``."""

    __slots__ = ("_names", "_indices")

    def __init__(self, names: Iterable[str] = ()):
        self._names: List[str] = []
        self._indices: Dict[str, int] = {}
        for name in names:
            self._add(name)

    def _add(self, name: str) -> None:
        if name not in self._indices:
            self._indices[name] = len(self._names)
            self._names.append(name)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> LiteralRegistry:
        """Collect literal names in first-occurrence order."""
        return cls(tok.text for tok in tokens if tok.is_literal)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def index_of(self, name: str) -> int:
        """Return the index of ``name``.

        Raises:
            KeyError: name is not a literal of this formula
        """
        return self._indices[name]

    def resolve(self, tokens: Sequence[Token]) -> Tuple[Token, ...]:
        """Return a copy of ``tokens`` with every literal bound to its index.

        Raises:
            KeyError: a literal token names a literal missing from the registry
        """
        return tuple(
            tok.with_index(self._indices[tok.text]) if tok.is_literal else tok
            for tok in tokens
        )

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralRegistry):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(tuple(self._names))

    def __repr__(self) -> str:
        return f"LiteralRegistry({self._names!r})"

    def __str__(self) -> str:
        return " ".join(self._names)


def build_registry(tokens: Sequence[Token]) -> Tuple[LiteralRegistry, Tuple[Token, ...]]:
    """Build the registry for ``tokens`` and resolve them against it.

    Args:
        tokens: Token sequence produced by the lexer

    Returns:
        The registry and the resolved token sequence
    """
    registry = LiteralRegistry.from_tokens(tokens)
    get_logger().debug(f"Registered {len(registry)} literal(s): {registry}")
    return registry, registry.resolve(tokens)
