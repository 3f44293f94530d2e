from __future__ import annotations

from collections.abc import Mapping, Sequence

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.config import EPSILON
from pyfsa.core.dfa import DFA
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.nfa import NFA
from pyfsa.core.types import Alphabet, NFATransition, State, Transition
from pyfsa.regex.compiler import compile_regex

TransitionRecord = Mapping[str, str]

_RECORD_KEYS = ("from", "to", "input")


def _names(value: object, label: str) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(name, str) for name in value):
        return list(value)
    fail(ErrorCode.INVALID_TYPE, f"{label} must be a str or sequence of str, got {type(value).__name__}")


def _records(transitions: object) -> list[TransitionRecord]:
    if isinstance(transitions, Mapping):
        return [transitions]
    if isinstance(transitions, Sequence) and not isinstance(transitions, str):
        if all(isinstance(record, Mapping) for record in transitions):
            return list(transitions)
    fail(ErrorCode.INVALID_TYPE, f"transitions must be a mapping or sequence of mappings, got {type(transitions).__name__}")


def _split_dest(to: str) -> list[str]:
    return [name.strip() for name in to.split(",")]


def _is_nondeterministic(records: list[TransitionRecord]) -> bool:
    return any("," in record["to"] or record["input"] == EPSILON for record in records)


def _check_record(record: TransitionRecord) -> None:
    missing = [key for key in _RECORD_KEYS if key not in record]
    if missing:
        fail(ErrorCode.INVALID_TRANSITION_OBJECT, f"transition record {dict(record)!r} is missing {missing}")
    for key in _RECORD_KEYS:
        if not isinstance(record[key], str):
            fail(ErrorCode.INVALID_TRANSITION_OBJECT, f"transition record field {key!r} must be a str")


def create_fsa(
    states: str | Sequence[str],
    alphabet: str | Sequence[str],
    transitions: TransitionRecord | Sequence[TransitionRecord],
    start: str,
    accepts: str | Sequence[str] | Mapping,
) -> FiniteAutomaton:
    """
    Build a DFA or NFA from plain names and transition records.

    Each record has `from`, `to` and `input` keys. `to` may be a
    comma-joined list of destination names. An NFA is built when any
    record has several destinations or an empty input; otherwise a DFA.

    Args:
        states: State name or sequence of names.
        alphabet: Symbols as a str or sequence of str.
        transitions: One record or a sequence of records.
        start: Start state name.
        accepts: Accept state name, sequence of names, or {} for none.

    Returns:
        The validated automaton.

    Raises:
        FSAError(INVALID_TYPE): an argument has the wrong shape.
        FSAError(INVALID_TRANSITION_OBJECT): a record is malformed.
        Any construction error of DFA / NFA.
    """
    state_names = _names(states, "states")
    records = _records(transitions)
    if not isinstance(start, str):
        fail(ErrorCode.INVALID_TYPE, f"start must be a str, got {type(start).__name__}")
    if isinstance(accepts, Mapping):
        if accepts:
            fail(ErrorCode.INVALID_TYPE, "accepts mapping must be empty")
        accept_names: list[str] = []
    else:
        accept_names = _names(accepts, "accepts")
    for record in records:
        _check_record(record)

    # Duplicate names create distinct State objects so the automaton can report them.
    state_list = [State(name) for name in state_names]
    by_name = {state.name: state for state in state_list}

    def resolve(name: str, code: ErrorCode) -> State:
        state = by_name.get(name)
        if state is None:
            fail(code, f"no state named {name!r}")
        return state

    start_state = by_name.get(start, State(start))
    accept_states = [by_name.get(name, State(name)) for name in accept_names]
    sigma = Alphabet(alphabet)

    if _is_nondeterministic(records):
        nfa_transitions = [
            NFATransition(
                resolve(record["from"], ErrorCode.ORIGIN_STATE_NOT_FOUND),
                tuple(resolve(name, ErrorCode.DEST_STATE_NOT_FOUND) for name in _split_dest(record["to"])),
                record["input"],
            )
            for record in records
        ]
        return NFA(state_list, sigma, nfa_transitions, start_state, accept_states)

    dfa_transitions = [
        Transition(
            resolve(record["from"], ErrorCode.ORIGIN_STATE_NOT_FOUND),
            resolve(record["to"], ErrorCode.DEST_STATE_NOT_FOUND),
            record["input"],
        )
        for record in records
    ]
    return DFA(state_list, sigma, dfa_transitions, start_state, accept_states)


def create_regex(pattern: str, alphabet: str | Sequence[str] | Alphabet) -> NFA:
    if not isinstance(alphabet, Alphabet):
        if not isinstance(alphabet, (str, Sequence)):
            fail(ErrorCode.INVALID_TYPE, f"alphabet must be a str, sequence or Alphabet, got {type(alphabet).__name__}")
        alphabet = Alphabet(alphabet)
    return compile_regex(pattern, alphabet)
