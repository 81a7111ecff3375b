# tests/conftest.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Galileo parser tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common model sources and token builders
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
        import galileo
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the shared logger to the session stdout before any capsys swap
    utils.get_logger()

    yield


@pytest.fixture
def scenario_a_source():
    """Two basic events under an OR top gate."""
    return "toplevel TOP; TOP or A B; A lambda=0.001; B lambda=0.002;"


@pytest.fixture
def complex_model_source():
    """Model exercising every gate operation and property kind."""
    return """
// Pumping station
toplevel System;
System and Pumps Valve;
Pumps 2 of 3 P1 P2 P3;
/* exponential pumps,
   one of them repairable */
P1 lambda=0.001 dorm=0.5;
P2 lambda=1e-3 repair=0.1;
P3 prob=0.25;
Valve ph=[-2.0, 2.0; 0, 0] failurestates=1;
"Spare Valve" or;
"""


@pytest.fixture
def tok():
    """Build parser tokens from (kind, value) pairs or bare kinds.

    Positions are synthesized as consecutive columns on line 1.
    """
    from galileo.tokens import SourcePosition, Token, TokenKind

    def build(*specs):
        tokens = []
        for index, spec in enumerate(specs):
            if isinstance(spec, TokenKind):
                kind, value = spec, spec.value.strip("'")
            else:
                kind, value = spec
            tokens.append(Token(kind, value, SourcePosition(1, index + 1, index), width=1))
        return tokens

    return build
