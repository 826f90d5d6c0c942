# parser/__init__.py
# This file is part of Toysat - A Toy SAT Solver
#
# Formula tokenization, literal resolution and evaluation components

"""Propositional formula front end for the backtracking solver.

The front end turns formula text into a resolved token sequence plus a
literal registry. There is no syntax tree: the evaluator interprets the
token sequence directly, once for every assignment the search tries.

Core Functions:
    parse: Tokenize formula text and resolve its literals
    check_syntax: Parse and evaluate once with every literal false

Supported Logic:
    - Literals: a letter followed by letters and digits
    - Connectives: & (AND), | (OR), ~ (NOT), parentheses for grouping

Grammar Features:
    - & and | share one precedence level and chain left to right
    - ~ applies to the clause that immediately follows it
    - Unknown characters are reported when they break a grammar rule

Example:
    >>> from parser import parse
    >>> formula = parse("a & ~b")
    >>> formula.registry.names
    ('a', 'b')
"""

from .exceptions import ParseError, NoLiteralsError
from .evaluator import Evaluator, EvalResult
from .formula import Formula
from .lexer import tokenize, tokens_to_string
from .registry import LiteralRegistry, build_registry
from .tokens import Token, TokenType
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Tokenize formula text and resolve its literals against a new registry.

    Args:
        source: Formula text

    Returns:
        Formula holding the resolved tokens and the literal registry

    Raises:
        ParseError: Text is empty or contains no tokens
        NoLiteralsError: Formula has no literals to solve for
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    if not source:
        raise ParseError("Contents is empty -- cannot solve")

    tokens = tokenize(source)
    if len(tokens) == 1:
        raise ParseError("No tokens found -- cannot solve")

    registry, resolved = build_registry(tokens)
    if len(registry) == 0:
        raise NoLiteralsError("There are no literals -- nothing to solve")

    logger.debug(f"Formula parsed into {len(resolved) - 1} token(s)")
    return Formula(source, resolved, registry)


def check_syntax(source: str) -> Formula:
    """Parse formula text and evaluate it once to surface grammar errors.

    Every literal reads as false during the check; the value is discarded.

    Args:
        source: Formula text

    Returns:
        The parsed formula

    Raises:
        ParseError: Formula cannot be parsed or breaks a grammar rule
    """
    formula = parse(source)
    Evaluator().evaluate(formula.tokens, [False] * formula.literal_count).unwrap()
    return formula


__all__ = [
    "parse",
    "check_syntax",
    "tokenize",
    "tokens_to_string",
    "build_registry",
    "Evaluator",
    "EvalResult",
    "Formula",
    "LiteralRegistry",
    "Token",
    "TokenType",
    "ParseError",
    "NoLiteralsError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula tokenization and evaluation components"
