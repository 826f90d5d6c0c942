# utils/logger.py
# This file is part of Toysat - A Toy SAT Solver
#
# Logging utility for the solver with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for the solver."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    def __init__(self):
        super().__init__(sys.stdout)

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


class SolverLogger:
    """Centralized logger for the solver with structured search output."""

    def __init__(self, name: str = "toysat", level: LogLevel = LogLevel.INFO):
        """Initialize the solver logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = _StdoutHandler()
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SolverFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """True when debug messages would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for solver events
    def parsed_input(self, tokens_text: str):
        """Log the token sequence read from the input."""
        self.info(f"Parsed Input: {tokens_text}")

    def unique_literals(self, names: Sequence[str]):
        """Log the literal registry in branching order."""
        self.info(f"Unique Literals: {' '.join(names)}")

    def search_start(self, formula_text: str, names: Sequence[str]):
        """Log the start of a search."""
        self.debug(f"=== Starting Search over {len(names)} literal(s) ===")
        self.debug(f"Formula: {' '.join(formula_text.split())}")

    def node_visited(self, depth: int, assignment: str, result: str):
        """Log the evaluation of one search node."""
        self.debug(f"{'  ' * depth}node {assignment} depth={depth} -> {result}")

    def branch(self, literal: str, depth: int):
        """Log branching on a thawed literal."""
        self.debug(f"{'  ' * depth}branching on {literal} (True first)")

    def dead_end(self, assignment: str):
        """Log a fully committed assignment that evaluated false."""
        self.debug(f"dead end at {assignment}")

    def search_finished(self, outcome: str):
        """Log the terminal state of a search."""
        self.debug(f"=== Search finished: {outcome} ===")

    def syntax_error(self, message: str):
        """Log a syntax error found before the search started."""
        self.debug(f"Syntax check failed: {message}")


class SolverFormatter(logging.Formatter):
    """Custom formatter for solver logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        # Default formatting for other levels
        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SolverLogger] = None


def get_logger(name: str = "toysat") -> SolverLogger:
    """Get or create the global solver logger instance.

    Args:
        name: Logger name (default: "toysat")

    Returns:
        SolverLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
