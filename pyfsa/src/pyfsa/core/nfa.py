from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import override

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.config import EPSILON
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.types import Alphabet, NFATransition, State, Transition


class NFA(FiniteAutomaton):
    """
    Non-deterministic finite automaton with ε-transitions.

    Σ implicitly includes ε. δ may be partial and multi-valued, and
    duplicate (origin, dest, input) triples collapse into one transition.
    Construction takes NFATransition objects (one origin, many
    destinations); plain Transitions are accepted as single-destination.
    """

    kind = "NFA"

    @override
    def _prepare_alphabet(self, alphabet: Alphabet) -> Alphabet:
        return alphabet.with_epsilon()

    @override
    def _expand_transitions(self, transitions: Iterable) -> list[Transition]:
        if isinstance(transitions, (str, Mapping)) or not isinstance(transitions, Iterable):
            fail(ErrorCode.INVALID_TYPE, f"transitions must be a collection, got {type(transitions).__name__}")

        expanded: list[Transition] = []
        for transition in transitions:
            if isinstance(transition, NFATransition):
                expanded.extend(transition.expand())
            elif isinstance(transition, Transition):
                expanded.append(transition)
            else:
                fail(
                    ErrorCode.INVALID_TRANSITION_OBJECT,
                    f"NFA expects NFATransition objects, got {type(transition).__name__}",
                )
        return expanded

    @override
    def _validate_transitions(self, transitions: list[Transition]) -> list[Transition]:
        # dict as an ordered set: drops repeated triples, keeps first-seen order
        retained: dict[Transition, None] = {}
        for transition in transitions:
            self._check_endpoints(transition)
            if transition.input not in self._alphabet:
                fail(ErrorCode.INVALID_INPUT_CHAR, f"symbol {transition.input!r} is not in the alphabet")
            retained.setdefault(transition, None)
        return list(retained)

    @override
    def _index_transitions(self) -> None:
        self._moves: dict[tuple[State, str], list[State]] = defaultdict(list)
        for transition in self._transitions:
            self._moves[(transition.origin, transition.input)].append(transition.dest)

    def epsilon_closure(self, states: State | Iterable[State]) -> frozenset[State]:
        """
        All states reachable from `states` using only ε-transitions.

        The input states are always part of the closure.
        """
        if isinstance(states, State):
            states = (states,)
        closure = set(states)
        worklist = list(closure)
        while worklist:
            state = worklist.pop()
            for dest in self._moves.get((state, EPSILON), ()):
                if dest not in closure:
                    closure.add(dest)
                    worklist.append(dest)
        return frozenset(closure)

    @override
    def receive_input(self, symbol: str, state: State | Iterable[State]) -> frozenset[State]:
        """
        Step a set of states on one symbol.

        The ε-closure of `state` is taken first. For ε the closure itself is
        returned. Otherwise the destinations of every matching transition
        are collected and closed again. No matching transition yields the
        empty set.
        """
        if symbol not in self._alphabet:
            fail(ErrorCode.INVALID_INPUT_CHAR, f"symbol {symbol!r} is not in the alphabet")

        current = self.epsilon_closure(state)
        if symbol == EPSILON:
            return current

        reached: set[State] = set()
        for origin in current:
            reached.update(self._moves.get((origin, symbol), ()))
        if not reached:
            return frozenset()
        return self.epsilon_closure(reached)
