# core/result.py
# This file is part of Toysat - A Toy SAT Solver
#
# Tagged search outcome: error, unsatisfiable, or satisfied with a witness

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple


class Outcome(Enum):
    """Terminal state reached by the backtracking search.

    Values:
        SATISFIED: An assignment making the formula true was found
        UNSATISFIABLE: Every assignment was tried and none made it true
        ERROR: Evaluation failed with a syntax error
    """

    SATISFIED = auto()
    UNSATISFIABLE = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SearchResult:
    """Result of solving one formula.

    Exactly one shape is populated per outcome: ``witness`` for SATISFIED,
    ``message`` for ERROR, nothing for UNSATISFIABLE.

    Attributes:
        outcome: Terminal state of the search
        witness: Literal names in registry order paired with their values
        message: Error message when the outcome is ERROR
    """

    outcome: Outcome
    witness: Tuple[Tuple[str, bool], ...] = ()
    message: Optional[str] = None

    @classmethod
    def satisfied(cls, witness: Tuple[Tuple[str, bool], ...]) -> SearchResult:
        return cls(Outcome.SATISFIED, tuple(witness))

    @classmethod
    def unsatisfiable(cls) -> SearchResult:
        return cls(Outcome.UNSATISFIABLE)

    @classmethod
    def error(cls, message: str) -> SearchResult:
        return cls(Outcome.ERROR, message=message)

    @property
    def is_satisfied(self) -> bool:
        return self.outcome is Outcome.SATISFIED

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.ERROR

    @property
    def assignment(self) -> Dict[str, bool]:
        """Witness as a name to value mapping in registry order.

        Raises:
            ValueError: The result is not SATISFIED
        """
        if not self.is_satisfied:
            raise ValueError(f"No assignment for a {self.outcome} result")
        return dict(self.witness)

    def to_line(self) -> str:
        """Render the one-line report printed by the command line tool.

        Returns:
            ``Satisfied with a=True b=False``, ``Unstatisfied`` or the
            error message
        """
        if self.outcome is Outcome.ERROR:
            return self.message or ""
        if self.outcome is Outcome.UNSATISFIABLE:
            return "Unstatisfied"
        pairs = " ".join(f"{name}={value}" for name, value in self.witness)
        return f"Satisfied with {pairs}"

    def __str__(self) -> str:
        return self.to_line()
