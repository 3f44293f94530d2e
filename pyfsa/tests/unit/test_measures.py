from __future__ import annotations

import numpy as np
import pytest

from pyfsa.core.types import Alphabet
from pyfsa.measures.language import acceptance_vector, enumerate_words, language_agreement
from pyfsa.measures.tensor import accept_mask, state_index, transition_tensor
from pyfsa.regex.compiler import compile_regex


# ============================================================================
# Transition tensor
# ============================================================================


def test_transition_tensor_dfa(ends_in_one_dfa) -> None:
    tensor = transition_tensor(ends_in_one_dfa)
    index = state_index(ends_in_one_dfa)

    assert tensor.shape == (2, 2, 2)
    assert tensor.dtype == np.bool_
    # DFA rows are one-hot
    np.testing.assert_array_equal(tensor.sum(axis=2), np.ones((2, 2), dtype=int))
    assert index[ends_in_one_dfa.start] == 0
    assert tensor[1, 0, 1]
    assert tensor[0, 1, 0]


def test_transition_tensor_nfa(third_from_end_nfa) -> None:
    tensor = transition_tensor(third_from_end_nfa)

    assert tensor.shape == (3, 4, 4)
    assert tensor[1, 0].sum() == 2
    assert not tensor[2].any()


def test_accept_mask(ends_in_one_dfa) -> None:
    np.testing.assert_array_equal(accept_mask(ends_in_one_dfa), np.array([False, True]))


# ============================================================================
# Language measures
# ============================================================================


def test_enumerate_words() -> None:
    words = list(enumerate_words(Alphabet("01"), 2))
    assert words == ["", "0", "1", "00", "01", "10", "11"]
    assert list(enumerate_words(Alphabet("ab").with_epsilon(), 1)) == ["", "a", "b"]


def test_enumerate_words_negative_length() -> None:
    with pytest.raises(ValueError):
        list(enumerate_words(Alphabet("01"), -1))


def test_acceptance_vector(ends_in_one_dfa) -> None:
    verdicts = acceptance_vector(ends_in_one_dfa, ["", "1", "10", "01"])
    np.testing.assert_array_equal(verdicts, np.array([False, True, False, True]))


def test_language_agreement(ends_in_one_dfa) -> None:
    words = list(enumerate_words(Alphabet("01"), 4))
    zeros_then_one = compile_regex("0%s1", Alphabet("01"))

    assert language_agreement(ends_in_one_dfa, ends_in_one_dfa, words) == 1.0
    assert 0.0 < language_agreement(ends_in_one_dfa, zeros_then_one, words) < 1.0

    with pytest.raises(ValueError):
        language_agreement(ends_in_one_dfa, zeros_then_one, [])
