"""
Pytest configuration and fixtures for pyfsa tests.

Provides small hand-built automata shared by unit and integration tests.
"""

import pytest


@pytest.fixture
def binary_alphabet():
    """Σ = {0, 1}."""
    from pyfsa.core.types import Alphabet

    return Alphabet("01")


@pytest.fixture
def ab_parts():
    """
    States, alphabet, transitions and accepts for a total DFA over {a, b}.

    q1 -a-> q1, q1 -b-> q2, q2 -a-> q1, q2 -b-> q2; F = {q2}.
    Returned as a dict so tests can tamper with single pieces.
    """
    from pyfsa.core.types import Alphabet, State, Transition

    q1 = State("q1")
    q2 = State("q2")
    return {
        "q1": q1,
        "q2": q2,
        "states": {q1, q2},
        "alphabet": Alphabet("ab"),
        "transitions": [
            Transition(q1, q1, "a"),
            Transition(q1, q2, "b"),
            Transition(q2, q1, "a"),
            Transition(q2, q2, "b"),
        ],
        "accepts": {q2},
    }


@pytest.fixture
def ends_in_one_dfa():
    """DFA over {0, 1} accepting words that end in 1."""
    from pyfsa.tasks.samples import make_ends_in_one_dfa

    return make_ends_in_one_dfa()


@pytest.fixture
def third_from_end_nfa():
    """NFA over {0, 1} accepting words with a 1 third from the end."""
    from pyfsa.tasks.samples import make_third_from_end_nfa

    return make_third_from_end_nfa()
