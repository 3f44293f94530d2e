"""
Simulation engine: run words against a DFA or NFA.

- simulate: Feed a whole word from the start state and report the verdict
- step_once: Single transition from named state(s)

Traces go to the `pyfsa.engine.simulate` logger at INFO when
SimulationOptions.trace is set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.config import EPSILON, EPSILON_LABEL, SimulationOptions
from pyfsa.core.dfa import DFA
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.nfa import NFA
from pyfsa.core.types import State

logger = logging.getLogger(__name__)


def _coerce_word(word: object) -> list[str]:
    if isinstance(word, str):
        return list(word)
    if isinstance(word, Sequence) and all(isinstance(symbol, str) for symbol in word):
        return list(word)
    fail(ErrorCode.INVALID_INPUT_TYPE, f"input must be a str or sequence of str, got {type(word).__name__}")


def _label(symbol: str) -> str:
    return EPSILON_LABEL if symbol == EPSILON else symbol


def _names(states: Iterable[State]) -> str:
    return "{" + ", ".join(sorted(state.name for state in states)) + "}"


def _check_automaton(fsa: object) -> None:
    if not isinstance(fsa, FiniteAutomaton):
        fail(ErrorCode.INVALID_TYPE, f"expected a DFA or NFA, got {type(fsa).__name__}")


def _simulate_dfa(symbols: list[str], dfa: DFA, options: SimulationOptions) -> bool | str:
    current = dfa.start
    for symbol in symbols:
        previous = current
        current = dfa.receive_input(symbol, previous)
        if options.trace:
            logger.info("%s x %s -> %s", previous.name, _label(symbol), current.name)

    accepted = current in dfa.accepts
    if options.trace:
        logger.info("Input %s", "Accepted" if accepted else "Rejected")
    return current.name if options.return_states else accepted


def _simulate_nfa(symbols: list[str], nfa: NFA, options: SimulationOptions) -> bool | frozenset[str]:
    current = nfa.epsilon_closure(nfa.start)
    for symbol in symbols:
        previous = current
        current = nfa.receive_input(symbol, previous)
        if options.trace:
            logger.info("%s x %s -> %s", _names(previous), _label(symbol), _names(current))

    accepted = not current.isdisjoint(nfa.accepts)
    if options.trace:
        logger.info("Input %s", "Accepted" if accepted else "Rejected")
    if options.return_states:
        return frozenset(state.name for state in current)
    return accepted


def simulate(
    word: str | Sequence[str],
    fsa: FiniteAutomaton,
    options: SimulationOptions | None = None,
) -> bool | str | frozenset[str]:
    """
    Run a word through an automaton from its start state.

    A DFA tracks one current state; an NFA tracks the ε-closed set of
    current states, starting from closure({q0}). For an NFA, the empty
    string is read as the single symbol ε.

    Args:
        word: A str (one symbol per character) or a sequence of symbols.
        fsa: DFA or NFA to run.
        options: SimulationOptions. Defaults to a plain boolean verdict.

    Returns:
        True/False for accept/reject, or with options.return_states the
        terminal state name (DFA) or frozenset of names (NFA).

    Raises:
        FSAError(INVALID_INPUT_TYPE): word is not a str or sequence of str.
        FSAError(INVALID_INPUT_CHAR): a symbol is not in the alphabet. No
            verdict is produced.
    """
    options = options or SimulationOptions()
    symbols = _coerce_word(word)
    _check_automaton(fsa)

    if options.trace:
        logger.info("Beginning %s simulation of %r", fsa.kind, word)

    if isinstance(fsa, NFA):
        if word == "":
            symbols = [EPSILON]
        return _simulate_nfa(symbols, fsa, options)
    return _simulate_dfa(symbols, fsa, options)


def _lookup(fsa: FiniteAutomaton, name: str) -> State:
    state = fsa.get_state(name)
    if state is None:
        fail(ErrorCode.INVALID_STATE_NAME, f"no state named {name!r}")
    return state


def step_once(
    symbol: str,
    state_ref: str | Sequence[str],
    fsa: FiniteAutomaton,
    options: SimulationOptions | None = None,
) -> str | frozenset[str]:
    """
    Take one transition from explicitly named state(s).

    Args:
        symbol: Input symbol.
        state_ref: State name, or for an NFA a sequence of names.
        fsa: DFA or NFA.
        options: Only `trace` is used.

    Returns:
        Destination state name (DFA) or frozenset of names (NFA).

    Raises:
        FSAError(INVALID_INPUT_TYPE): symbol or state_ref has the wrong type.
        FSAError(INVALID_STATE_NAME): a name is not in the automaton's states.
        FSAError(INVALID_STATE_ARRAY): more than one name given for a DFA.
    """
    options = options or SimulationOptions()
    if not isinstance(symbol, str):
        fail(ErrorCode.INVALID_INPUT_TYPE, f"symbol must be a str, got {type(symbol).__name__}")

    if isinstance(state_ref, str):
        names = [state_ref]
    elif isinstance(state_ref, Sequence) and all(isinstance(name, str) for name in state_ref):
        names = list(state_ref)
    else:
        fail(ErrorCode.INVALID_INPUT_TYPE, f"state_ref must be a str or sequence of str, got {type(state_ref).__name__}")
    _check_automaton(fsa)

    if isinstance(fsa, NFA):
        origins = frozenset(_lookup(fsa, name) for name in names)
        dests = fsa.receive_input(symbol, origins)
        if options.trace:
            logger.info("%s x %s -> %s", _names(origins), _label(symbol), _names(dests))
        return frozenset(state.name for state in dests)

    if len(names) != 1:
        fail(ErrorCode.INVALID_STATE_ARRAY, "a DFA steps from exactly one state")
    origin = _lookup(fsa, names[0])
    dest = fsa.receive_input(symbol, origin)
    if options.trace:
        logger.info("%s x %s -> %s", origin.name, _label(symbol), dest.name)
    return dest.name
