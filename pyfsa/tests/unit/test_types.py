"""
Test types.py dataclasses with validation.
"""

import pytest

from pyfsa.core.errors import ErrorCode, FSAError
from pyfsa.core.types import Alphabet, NFATransition, State, Transition


# ============================================================================
# Alphabet Tests
# ============================================================================


class TestAlphabetValid:
    """Valid Alphabet construction."""

    def test_alphabet_from_string(self):
        """A string is split into one symbol per character."""
        a = Alphabet("abcd")
        assert a.sigma == ("a", "b", "c", "d")
        assert len(a) == 4

    def test_alphabet_from_sequence(self):
        """An explicit sequence keeps its order."""
        a = Alphabet(["1", "0", " "])
        assert a.sigma == ("1", "0", " ")
        assert " " in a

    def test_alphabet_empty_allowed(self):
        """Empty alphabet is permitted."""
        assert Alphabet("").sigma == ()
        assert Alphabet([]).sigma == ()

    def test_alphabet_is_immutable(self):
        """sigma cannot be reassigned."""
        a = Alphabet("ab")
        with pytest.raises(AttributeError):
            a.sigma = ("c",)

    def test_with_epsilon_appends_once(self):
        """with_epsilon adds ε at the end and is a no-op when present."""
        a = Alphabet("01")
        eps = a.with_epsilon()
        assert eps.sigma == ("0", "1", "")
        assert a.sigma == ("0", "1")
        assert eps.with_epsilon() is eps


class TestAlphabetValidation:
    """Alphabet validation rules."""

    def test_alphabet_duplicates_raise(self):
        """Repeated symbols are rejected."""
        for sigma in ("abb", "bbb", ["a", "a"]):
            with pytest.raises(FSAError) as excinfo:
                Alphabet(sigma)
            assert excinfo.value.code is ErrorCode.DUPLICATE_ALPHABET_VALUE

    def test_alphabet_invalid_type(self):
        """Non-string, non-sequence input is a type error."""
        for sigma in (None, 0, lambda: None, ["a", 1]):
            with pytest.raises(TypeError) as excinfo:
                Alphabet(sigma)
            assert excinfo.value.code is ErrorCode.INVALID_TYPE


# ============================================================================
# State Tests
# ============================================================================


class TestState:
    """State naming and identity."""

    def test_state_name(self):
        s = State("st1")
        assert s.name == "st1"

    def test_state_invalid_name(self):
        """Empty or missing names are rejected."""
        for name in ("", None, 3):
            with pytest.raises(FSAError, match="InvalidStateName"):
                State(name)

    def test_states_compare_by_identity(self):
        """Same-named states are still distinct objects."""
        a = State("q1")
        b = State("q1")
        assert a != b
        assert len({a, b}) == 2
        assert a == a


# ============================================================================
# Transition Tests
# ============================================================================


class TestTransition:
    """Transition and NFATransition containers."""

    def test_transition_fields(self):
        q1, q2 = State("q1"), State("q2")
        t = Transition(q1, q2, "a")
        assert t.origin is q1
        assert t.dest is q2
        assert t.input == "a"

    def test_transition_equality_uses_state_identity(self):
        """Equal triples collapse; same names on other objects do not."""
        q1, q2 = State("q1"), State("q2")
        assert Transition(q1, q2, "a") == Transition(q1, q2, "a")
        assert Transition(q1, q2, "a") != Transition(State("q1"), q2, "a")

    def test_transition_input_not_validated(self):
        """Symbol membership is checked by the automaton, not here."""
        q1 = State("q1")
        assert Transition(q1, q1, "anything").input == "anything"

    def test_nfa_transition_normalizes_dest(self):
        q1, q2 = State("q1"), State("q2")
        assert NFATransition(q1, [q1, q2], "1").dest == (q1, q2)
        assert NFATransition(q1, q2, "1").dest == (q2,)

    def test_nfa_transition_expand(self):
        """One Transition per destination, in order."""
        q1, q2 = State("q1"), State("q2")
        expanded = NFATransition(q1, (q1, q2), "").expand()
        assert expanded == [Transition(q1, q1, ""), Transition(q1, q2, "")]
