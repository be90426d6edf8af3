"""
Pytest configuration and fixtures for pyfsm tests.

Provides a deterministic RNG and a few small reference automata.
"""

import pytest


EXAMPLE_TEXT = """:states:
a
b
:initial:
a
:accept:
b
:alphabet:
0
1
:transitions:
a, 0 > b
a, 1 > b
b, 0 > b
b, 1 > a
"""


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used throughout the test suite to ensure reproducible random automata.
    """
    from pyfsm.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def example_text():
    """Two-state machine over {0, 1} accepting in b."""
    return EXAMPLE_TEXT


@pytest.fixture
def example_automaton():
    """The two-state machine built from EXAMPLE_TEXT."""
    from pyfsm.core.automaton import build
    return build(EXAMPLE_TEXT)


@pytest.fixture
def partial_automaton():
    """
    Machine with missing transitions.

    a reads 0 into b; b has no outgoing transitions, so runs halt there.
    """
    from pyfsm.core.automaton import build
    return build(
        {
            "states": ["a", "b", "c"],
            "initial": "a",
            "accept": ["b"],
            "alphabet": ["0", "1"],
            "transitions": [["a", "0", "b"], ["c", "1", "a"]],
        }
    )
