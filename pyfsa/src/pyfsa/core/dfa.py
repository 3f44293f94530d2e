from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import override

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.config import EPSILON
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.types import State, Transition

logger = logging.getLogger(__name__)


class DFA(FiniteAutomaton):
    """
    Deterministic finite automaton.

    δ must be total and functional over Q x Σ: exactly one transition for
    every (state, symbol) pair. Transitions that do not match a required
    pair are rejected, and uncovered pairs are fatal.
    """

    kind = "DFA"

    @override
    def _validate_transitions(self, transitions: list[Transition]) -> list[Transition]:
        if EPSILON in self._alphabet:
            fail(ErrorCode.INVALID_INPUT_CHAR, "a DFA alphabet cannot contain the empty symbol")

        # Remaining symbols per state; a pair is removed once a transition covers it.
        required: dict[State, set[str]] = {
            state: set(self._alphabet.sigma) for state in self._states if self._alphabet.sigma
        }
        retained: list[Transition] = []

        for transition in transitions:
            self._check_endpoints(transition)
            if transition.input not in self._alphabet:
                fail(ErrorCode.INVALID_INPUT_CHAR, f"symbol {transition.input!r} is not in the alphabet")

            pending = required.get(transition.origin)
            if pending is None or transition.input not in pending:
                fail(
                    ErrorCode.DUPLICATE_TRANSITION_OBJECT,
                    f"{transition.origin.name} x {transition.input!r} already has a transition",
                )

            retained.append(transition)
            pending.discard(transition.input)
            if not pending:
                del required[transition.origin]

        if required:
            logger.error("Not all FSA paths have a transition specified:")
            for state, symbols in sorted(required.items(), key=lambda item: item[0].name):
                logger.error("State %s on input(s): %s", state.name, " ".join(sorted(symbols)))
            fail(
                ErrorCode.MISSING_REQUIRED_TRANSITION,
                f"{sum(len(symbols) for symbols in required.values())} (state, symbol) pairs have no transition",
            )

        return retained

    @override
    def _index_transitions(self) -> None:
        self._delta: dict[tuple[State, str], State] = {
            (transition.origin, transition.input): transition.dest for transition in self._transitions
        }

    @override
    def receive_input(self, symbol: str, state: State | Sequence[State]) -> State:
        """
        Return the unique destination of state x symbol.

        A one-element sequence of states is unwrapped; a longer one is an
        InvalidStateArray error.
        """
        if symbol not in self._alphabet:
            fail(ErrorCode.INVALID_INPUT_CHAR, f"symbol {symbol!r} is not in the alphabet")

        if not isinstance(state, State) and isinstance(state, Sequence):
            if len(state) != 1:
                fail(ErrorCode.INVALID_STATE_ARRAY, "a DFA steps from exactly one state")
            state = state[0]

        if state not in self._states:
            fail(ErrorCode.INPUT_STATE_NOT_FOUND, f"state {getattr(state, 'name', state)!r} is not in states")

        dest = self._delta.get((state, symbol))
        if dest is None:
            fail(ErrorCode.INVALID_TRANSITION_OBJECT, f"no transition for {state.name} x {symbol!r}")
        return dest
