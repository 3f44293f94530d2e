from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.graph import remove_dead_states, state_order
from pyfsa.core.types import Alphabet, State, Transition
from pyfsa.viz.digraph import generate_digraph

logger = logging.getLogger(__name__)


def _adopt_states(collection: object, label: str) -> set[State]:
    # A caller-supplied set is kept by reference: dead-state pruning
    # mutates it in place.
    if isinstance(collection, set):
        adopted = collection
    elif isinstance(collection, Iterable) and not isinstance(collection, (str, Mapping)):
        adopted = set(collection)
    else:
        fail(ErrorCode.INVALID_TYPE, f"{label} must be a collection of State, got {type(collection).__name__}")

    for state in adopted:
        if not isinstance(state, State):
            fail(ErrorCode.INVALID_TYPE, f"{label} must contain only State objects, got {type(state).__name__}")
    return adopted


def _normalize_accepts(accepts: object) -> set[State]:
    if accepts is None:
        return set()
    if isinstance(accepts, Mapping):
        if accepts:
            fail(ErrorCode.INVALID_TYPE, "accepts mapping must be empty")
        return set()
    return _adopt_states(accepts, "accepts")


def _check_duplicate_names(states: set[State]) -> None:
    seen: set[str] = set()
    for state in states:
        if state.name in seen:
            fail(ErrorCode.DUPLICATE_STATE_NAMES, f"state name {state.name!r} is used more than once")
        seen.add(state.name)


class FiniteAutomaton(ABC):
    """
    Shared construction scaffold for the 5-tuple (Q, Σ, δ, q0, F).

    Validation order:
    1. Duplicate state names
    2. Start state membership
    3. Accept states subset
    4. Transition function (variant-specific)
    5. Dead-state elimination

    Q and F are adopted from the caller and may be pruned in place, so the
    same collections must not be handed to a second automaton.
    """

    kind: str = ""

    def __init__(
        self,
        states: Iterable[State],
        alphabet: Alphabet,
        transitions: Iterable,
        start: State,
        accepts: Iterable[State] | Mapping | None,
    ):
        if not isinstance(alphabet, Alphabet):
            fail(ErrorCode.INVALID_TYPE, f"alphabet must be an Alphabet, got {type(alphabet).__name__}")

        states = _adopt_states(states, "states")
        _check_duplicate_names(states)

        if start not in states:
            fail(ErrorCode.START_STATE_NOT_FOUND, f"start state {getattr(start, 'name', start)!r} is not in states")

        accepts = _normalize_accepts(accepts)
        if not accepts <= states:
            fail(ErrorCode.ACCEPTS_NOT_SUBSET, "accept states must be a subset of states")

        self._states: set[State] = states
        self._alphabet: Alphabet = self._prepare_alphabet(alphabet)
        self._start: State = start
        self._accepts: set[State] = accepts

        validated = self._validate_transitions(self._expand_transitions(transitions))
        self._transitions: tuple[Transition, ...] = tuple(
            remove_dead_states(self._states, self._start, self._accepts, validated)
        )
        self._index_transitions()

        logger.debug(
            "Built %s: %d states, %d symbols, %d transitions, %d accept states",
            self.kind,
            len(self._states),
            len(self._alphabet),
            len(self._transitions),
            len(self._accepts),
        )

    def _prepare_alphabet(self, alphabet: Alphabet) -> Alphabet:
        return alphabet

    def _expand_transitions(self, transitions: Iterable) -> list[Transition]:
        if isinstance(transitions, (str, Mapping)) or not isinstance(transitions, Iterable):
            fail(ErrorCode.INVALID_TYPE, f"transitions must be a collection, got {type(transitions).__name__}")

        expanded: list[Transition] = []
        for transition in transitions:
            if not isinstance(transition, Transition):
                fail(
                    ErrorCode.INVALID_TRANSITION_OBJECT,
                    f"{self.kind} expects Transition objects, got {type(transition).__name__}",
                )
            expanded.append(transition)
        return expanded

    def _check_endpoints(self, transition: Transition) -> None:
        if transition.origin not in self._states:
            fail(ErrorCode.ORIGIN_STATE_NOT_FOUND, f"origin {transition.origin.name!r} is not in states")
        if transition.dest not in self._states:
            fail(ErrorCode.DEST_STATE_NOT_FOUND, f"dest {transition.dest.name!r} is not in states")

    @abstractmethod
    def _validate_transitions(self, transitions: list[Transition]) -> list[Transition]:
        raise NotImplementedError

    @abstractmethod
    def _index_transitions(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def receive_input(self, symbol: str, state):
        raise NotImplementedError

    @property
    def states(self) -> set[State]:
        return self._states

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def transitions(self) -> tuple[Transition, ...]:
        return self._transitions

    @property
    def start(self) -> State:
        return self._start

    @property
    def accepts(self) -> set[State]:
        return self._accepts

    def get_state(self, name: str) -> State | None:
        for state in self._states:
            if state.name == name:
                return state
        return None

    def state_order(self) -> list[State]:
        return state_order(self._start, self._transitions)

    def generate_digraph(self) -> str:
        return generate_digraph(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(states={len(self._states)}, "
            f"alphabet={list(self._alphabet.sigma)!r}, "
            f"start={self._start.name!r}, "
            f"accepts={sorted(state.name for state in self._accepts)!r})"
        )
