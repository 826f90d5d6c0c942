#!/usr/bin/env python3
# run_solver.py
# This file is part of Toysat - A Toy SAT Solver
#
# Command-line interface for the solver with configurable logging levels

import sys
import argparse
from enum import IntEnum
from typing import List, Optional, TextIO

from core.solver import BacktrackingSolver
from core.stats import SearchStats, SearchTrace
from parser import parse, tokens_to_string
from parser.exceptions import ParseError
from utils.input_reader import (
    InputReadError,
    flatten_arguments,
    read_formula_file,
    read_stream,
)
from utils.logger import configure_logging, get_logger


class ExitCode(IntEnum):
    """Process exit codes, following MiniSat except for satisfiable (0, not 10)."""

    SATISFIABLE = 0
    CANNOT_READ_INPUT = 1
    COMMAND_LINE_FAIL = 2
    CANNOT_PARSE_INPUT = 3
    INTERRUPTED = 4
    UNSATISFIABLE = 20


USAGE_EPILOG = """
A toy SAT (boolean SATisfiability) solver
https://en.wikipedia.org/wiki/Satisfiability

Put the logic expression on the command line (in quotes), in a file, or
send it via stdin.

Example expressions:
  a & ~b
  x & ~x
  mike & sally & ~peter
  ~(mike & sally) & ~peter

Supported: &=and, |=or, ~=not, ()=brackets, letters=literals
& and | have equal precedence and are applied left to right.

Exit codes:
  0 satisfiable, 20 unsatisfiable, 3 unparseable input,
  1 unreadable input, 2 command-line usage failure
"""


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="toysat",
        description="Decide satisfiability of a propositional formula",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE_EPILOG,
    )

    parser.add_argument(
        "formula", nargs="*", help="Formula words; joined with spaces"
    )

    parser.add_argument(
        "-f", "--file", help="Read the formula from a file instead of stdin"
    )

    parser.add_argument(
        "-?", dest="show_usage", action="store_true", help="Print usage and exit"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show parsed input and literals"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Log every search node (overrides --verbose)"
    )

    parser.add_argument(
        "--stats", action="store_true", help="Print evaluation and search counters"
    )

    parser.add_argument(
        "--graph", metavar="PATH", help="Write the explored search tree as Graphviz DOT"
    )

    parser.add_argument(
        "--graph-format",
        metavar="FMT",
        help="Also render the search tree image (e.g. png, svg); needs Graphviz",
    )

    return parser


def read_formula_text(args: argparse.Namespace, stdin: TextIO) -> str:
    """Return the formula text from the words, the file, or stdin, in that order.

    Raises:
        InputReadError: The file or stream cannot be read
    """
    if args.formula:
        return flatten_arguments(args.formula)
    if args.file:
        return read_formula_file(args.file)
    return read_stream(stdin)


def report_stats(stats: SearchStats) -> None:
    for line in stats.summary_lines():
        print(line)


def write_graph(args: argparse.Namespace, trace: SearchTrace, result, title: str) -> None:
    # Deferred so graphviz is only imported when a graph is requested
    from utils.tree_visualizer import save_search_tree

    save_search_tree(trace, args.graph, result=result, title=title, fmt=args.graph_format)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the solver.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None

    Returns:
        Exit code, see ``ExitCode``
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    if args.show_usage:
        parser.print_help(sys.stderr)
        return ExitCode.COMMAND_LINE_FAIL

    if args.formula and args.file:
        parser.error("give the formula either as arguments or with --file, not both")

    try:
        text = read_formula_text(args, sys.stdin)
    except InputReadError as e:
        print(str(e), file=sys.stderr)
        return ExitCode.CANNOT_READ_INPUT

    try:
        formula = parse(text)
    except ParseError as e:
        print(str(e), file=sys.stderr)
        return ExitCode.CANNOT_PARSE_INPUT

    logger.parsed_input(tokens_to_string(formula.tokens))
    logger.unique_literals(formula.registry.names)

    stats = SearchStats()
    trace = SearchTrace() if args.graph else None

    try:
        result = BacktrackingSolver(formula).solve(stats, trace)
    except KeyboardInterrupt:
        print("Search interrupted by user", file=sys.stderr)
        return ExitCode.INTERRUPTED

    if result.is_error:
        print(f"Formula has invalid syntax -- {result.message}", file=sys.stderr)
        return ExitCode.CANNOT_PARSE_INPUT

    print(result.to_line())

    if args.stats:
        report_stats(stats)

    if trace is not None:
        write_graph(args, trace, result, " ".join(text.split()))

    if result.is_satisfied:
        return ExitCode.SATISFIABLE
    return ExitCode.UNSATISFIABLE


if __name__ == "__main__":
    sys.exit(main())
