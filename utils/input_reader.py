# utils/input_reader.py
# This file is part of Toysat - A Toy SAT Solver
#
# Formula text sources: command-line words, streams and files

from pathlib import Path
from typing import Iterable, TextIO
from utils.logger import get_logger


class InputReadError(Exception):
    """Exception raised when formula input cannot be read."""

    pass


def flatten_arguments(args: Iterable[str]) -> str:
    """Join command-line words into one formula, separated by single spaces.

    Example:
        >>> flatten_arguments(["a", "&", "~b"])
        'a & ~b'
    """
    return " ".join(args)


def normalize_newlines(text: str) -> str:
    """Drop carriage returns and turn line feeds into spaces.

    A formula may span several lines of a file; joining the lines with spaces
    keeps identifiers on either side of a line break apart.
    """
    return text.replace("\r", "").replace("\n", " ")


def read_stream(stream: TextIO) -> str:
    """Read a whole text stream as a single-line formula.

    Args:
        stream: Open text stream, typically ``sys.stdin``

    Returns:
        Stream contents with line breaks normalized

    Raises:
        InputReadError: Stream cannot be read
    """
    logger = get_logger()
    try:
        contents = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read input: {e}") from e

    logger.debug(f"Read {len(contents)} character(s) from stream")
    return normalize_newlines(contents)


def read_formula_file(filepath: str) -> str:
    """Read a formula file as a single-line formula.

    Args:
        filepath: Path to the formula file

    Returns:
        File contents with line breaks normalized

    Raises:
        InputReadError: File is missing or cannot be read
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise InputReadError(f"Formula file not found: {filepath}")

    logger.debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as file:
            return normalize_newlines(file.read())
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Cannot read formula file {filepath}: {e}") from e
