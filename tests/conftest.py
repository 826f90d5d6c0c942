# tests/conftest.py
# This file is part of Toysat - A Toy SAT Solver
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the solver tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for evaluator and solver components
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def evaluator():
    """Provide a fresh evaluator."""
    from parser.evaluator import Evaluator

    return Evaluator()


@pytest.fixture
def stats():
    """Provide empty search counters."""
    from core.stats import SearchStats

    return SearchStats()


@pytest.fixture
def evaluate():
    """Evaluate formula text under explicit literal values.

    Returns:
        Callable taking the formula text and a name to value mapping;
        literals missing from the mapping read as False
    """
    from parser import parse
    from parser.evaluator import Evaluator

    def _evaluate(text, values=None):
        formula = parse(text)
        values = values or {}
        assignment = [bool(values.get(name, False)) for name in formula.registry.names]
        return Evaluator().evaluate(formula.tokens, assignment)

    return _evaluate


@pytest.fixture
def basic_formula():
    """Provide a simple satisfiable formula."""
    return "a & ~b"


@pytest.fixture
def contradiction():
    """Provide a formula with no satisfying assignment."""
    return "x & ~x"
