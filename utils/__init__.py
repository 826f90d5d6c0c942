# utils/__init__.py
# This file is part of Toysat - A Toy SAT Solver
#
# Utility module exports

from .input_reader import (
    read_formula_file,
    read_stream,
    flatten_arguments,
    normalize_newlines,
    InputReadError,
)

__all__ = [
    "read_formula_file",
    "read_stream",
    "flatten_arguments",
    "normalize_newlines",
    "InputReadError",
]
