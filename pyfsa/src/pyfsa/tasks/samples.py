from __future__ import annotations

from pyfsa.core.dfa import DFA
from pyfsa.core.nfa import NFA
from pyfsa.core.types import Alphabet, NFATransition, State, Transition
from pyfsa.tasks.factory import create_fsa


def make_div3_dfa() -> DFA:
    """Binary numbers divisible by 3, read most significant bit first."""
    return create_fsa(
        states=["q0", "q1", "q2"],
        alphabet="01",
        transitions=[
            {"from": "q0", "to": "q0", "input": "0"},
            {"from": "q0", "to": "q1", "input": "1"},
            {"from": "q1", "to": "q2", "input": "0"},
            {"from": "q1", "to": "q0", "input": "1"},
            {"from": "q2", "to": "q1", "input": "0"},
            {"from": "q2", "to": "q2", "input": "1"},
        ],
        start="q0",
        accepts="q0",
    )


def make_ends_in_one_dfa() -> DFA:
    q1 = State("q1")
    q2 = State("q2")
    return DFA(
        states={q1, q2},
        alphabet=Alphabet("01"),
        transitions=[
            Transition(q1, q1, "0"),
            Transition(q1, q2, "1"),
            Transition(q2, q2, "1"),
            Transition(q2, q1, "0"),
        ],
        start=q1,
        accepts={q2},
    )


def make_third_from_end_nfa() -> NFA:
    """Words over {0, 1} with a 1 in the third position from the end."""
    q1, q2, q3, q4 = (State(name) for name in ("q1", "q2", "q3", "q4"))
    return NFA(
        states={q1, q2, q3, q4},
        alphabet=Alphabet("01"),
        transitions=[
            NFATransition(q1, (q1,), "0"),
            NFATransition(q1, (q1, q2), "1"),
            NFATransition(q2, (q3,), "0"),
            NFATransition(q2, (q3,), "1"),
            NFATransition(q3, (q4,), "0"),
            NFATransition(q3, (q4,), "1"),
        ],
        start=q1,
        accepts={q4},
    )
