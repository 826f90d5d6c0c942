# parser/evaluator.py
# This file is part of Toysat - A Toy SAT Solver
#
# Recursive-descent interpreter for propositional formulas over a token stream

"""Direct interpreter for resolved formula token sequences.

The evaluator walks the token sequence under an assignment of truth values
and returns a boolean or a descriptive error. No syntax tree is built; the
same token sequence is re-interpreted for every assignment the search tries.

Grammar:
    <expr>    = <clause> <op> <clause> <op> ...
    <clause>  = ~ <clause>
              = <literal>
              = ( <expr> )
    <op>      = &
              = |

Semantics:
    - ``&`` and ``|`` have the same precedence and chain strictly left to
      right, so ``a & b | c`` means ``(a & b) | c`` and ``a | b & c`` means
      ``(a | b) & c``.
    - Both operands of a binary operator are always evaluated.
    - A literal reads its value through its pre-resolved registry index.

The grammar is recursive, but the interpreter keeps its pending work on an
explicit stack of continuation frames, so bracket and negation nesting is
limited only by available memory.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from utils.logger import get_logger
from .exceptions import ParseError
from .tokens import Token, TokenType

if TYPE_CHECKING:
    from core.stats import SearchStats


@dataclass(frozen=True, slots=True)
class EvalResult:
    """Outcome of one evaluation: a boolean value or an error, never both."""

    value: Optional[bool] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("EvalResult needs exactly one of value or error")

    @classmethod
    def ok(cls, value: bool) -> EvalResult:
        return cls(value=bool(value))

    @classmethod
    def fail(cls, message: str) -> EvalResult:
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_true(self) -> bool:
        return self.value is True

    def unwrap(self) -> bool:
        """Return the value or raise the error as a ParseError."""
        if self.error is not None:
            raise ParseError(self.error)
        return self.value

    def __str__(self) -> str:
        if self.error is not None:
            return self.error
        return "True" if self.value else "False"


class _Frame(Enum):
    """Continuation kinds waiting for a clause or expression value."""

    NOT = auto()  # negate the clause value
    EXPR_FIRST = auto()  # first clause of an expression
    EXPR_RHS = auto()  # right operand of a pending & or |
    BRACKET = auto()  # expression inside ( ... ) awaiting the close bracket


_CLAUSE_START_ERRORS = {
    TokenType.AND: "A clause cannot begin with an &",
    TokenType.OR: "A clause cannot begin with an |",
    TokenType.CLOSE_PAREN: "Unexpected Close Bracket",
    TokenType.EOF: "Unexpected Eof",
}

_OPERATORS = (TokenType.AND, TokenType.OR)
_EXPR_END = (TokenType.CLOSE_PAREN, TokenType.EOF)


class Evaluator:
    """Interprets a resolved token sequence under an assignment.

    The assignment is any sequence of booleans indexed by registry index;
    literals that the search has not committed yet simply hold ``False``.
    """

    def evaluate(
        self,
        tokens: Sequence[Token],
        assignment: Sequence[bool],
        stats: Optional[SearchStats] = None,
    ) -> EvalResult:
        """Evaluate a complete formula.

        Args:
            tokens: Resolved tokens ending with an EOF token
            assignment: Truth value per registry index
            stats: Optional counters updated in place

        Returns:
            The formula's value, or the first error met
        """
        result, position = self.evaluate_from(tokens, 0, assignment, stats)
        if result.is_error:
            return result

        # A close bracket with no open bracket left to match
        if tokens[position].type is TokenType.CLOSE_PAREN:
            return EvalResult.fail("Unexpected Close Bracket")
        return result

    def evaluate_from(
        self,
        tokens: Sequence[Token],
        position: int,
        assignment: Sequence[bool],
        stats: Optional[SearchStats] = None,
    ) -> Tuple[EvalResult, int]:
        """Evaluate one expression starting at ``position``.

        Evaluation stops at the end of input or in front of a close bracket,
        which is left unconsumed for the enclosing bracket check.

        Args:
            tokens: Resolved tokens ending with an EOF token
            position: Index of the first token of the expression
            assignment: Truth value per registry index
            stats: Optional counters updated in place

        Returns:
            The result and the index of the first unconsumed token
        """
        result, end, lookups, depth = self._interpret(tokens, position, assignment)

        if stats is not None:
            stats.evaluations += 1
            stats.lookups += lookups
            if depth > stats.max_nesting:
                stats.max_nesting = depth

        if result.is_error:
            get_logger().debug(f"Evaluation failed at token {end}: {result.error}")
        return result, end

    def _interpret(
        self, tokens: Sequence[Token], pos: int, assignment: Sequence[bool]
    ) -> Tuple[EvalResult, int, int, int]:
        """Run the interpreter loop.

        Returns:
            (result, position, literal lookups, deepest frame stack)
        """
        stack: List[Tuple[_Frame, bool, Optional[TokenType]]] = [
            (_Frame.EXPR_FIRST, False, None)
        ]
        lookups = 0
        deepest = 1

        while True:
            # Interpret the clause starting at pos
            tok = tokens[pos]
            kind = tok.type

            if kind is TokenType.NOT:
                pos += 1
                if tokens[pos].is_eof:
                    return EvalResult.fail("Expected something after a Not"), pos, lookups, deepest
                stack.append((_Frame.NOT, False, None))
                deepest = max(deepest, len(stack))
                continue

            if kind is TokenType.OPEN_PAREN:
                pos += 1
                if tokens[pos].is_eof:
                    return (
                        EvalResult.fail("Expected something after an Open Bracket"),
                        pos, lookups, deepest,
                    )
                stack.append((_Frame.BRACKET, False, None))
                stack.append((_Frame.EXPR_FIRST, False, None))
                deepest = max(deepest, len(stack))
                continue

            if kind is TokenType.LITERAL:
                index = tok.index
                if index is None or not 0 <= index < len(assignment):
                    return EvalResult.fail(f"Unknown Literal {tok.text}"), pos, lookups, deepest
                value = bool(assignment[index])
                lookups += 1
                pos += 1
            elif kind is TokenType.UNKNOWN:
                return (
                    EvalResult.fail(f"Encountered Unknown token '{tok.text}'"),
                    pos, lookups, deepest,
                )
            else:
                return EvalResult.fail(_CLAUSE_START_ERRORS[kind]), pos, lookups, deepest

            # Hand the clause value to the waiting frames until one of them
            # needs another clause
            while True:
                frame, left, op = stack.pop()

                if frame is _Frame.NOT:
                    value = not value
                    continue

                if frame is _Frame.EXPR_RHS:
                    value = (left and value) if op is TokenType.AND else (left or value)

                # Expression frame: expect an operator or the end of the expression
                following = tokens[pos]
                if following.type in _OPERATORS:
                    pos += 1
                    if tokens[pos].is_eof:
                        return (
                            EvalResult.fail("Expected something after an And/Or"),
                            pos, lookups, deepest,
                        )
                    stack.append((_Frame.EXPR_RHS, value, following.type))
                    break

                if following.type not in _EXPR_END:
                    return (
                        EvalResult.fail(
                            f"Unexpected {following} -- Only And/Or can connect clauses"
                        ),
                        pos, lookups, deepest,
                    )

                if not stack:
                    return EvalResult.ok(value), pos, lookups, deepest

                # The expression was bracketed; the frame below is BRACKET
                stack.pop()
                if following.type is not TokenType.CLOSE_PAREN:
                    return EvalResult.fail("Expected Close Bracket"), pos, lookups, deepest
                pos += 1
