# parser/exceptions.py
# This file is part of Toysat - A Toy SAT Solver
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for formula processing.

The evaluator reports grammar errors as values (see ``EvalResult``) because
it runs once per search node. These exceptions are raised at the pipeline
boundary, where a formula that cannot be solved at all is rejected.
"""


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be parsed.

    Covers empty input, input without tokens, and grammar errors found by the
    pre-search syntax check.
    """

    pass


class NoLiteralsError(ParseError):
    """Exception raised when a formula contains no literals to solve for."""

    pass
