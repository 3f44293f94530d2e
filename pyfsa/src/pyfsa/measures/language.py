from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import product

import numpy as np

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.config import EPSILON
from pyfsa.core.types import Alphabet
from pyfsa.engine.simulate import simulate


def enumerate_words(alphabet: Alphabet, max_length: int) -> Iterator[str]:
    """
    Yield every word over Σ \\ {ε} of length 0..max_length, shortest first.

    Within one length, words follow the order of alphabet.sigma.
    """
    if max_length < 0:
        raise ValueError("max_length must be >= 0")

    symbols = [symbol for symbol in alphabet.sigma if symbol != EPSILON]
    for length in range(max_length + 1):
        for letters in product(symbols, repeat=length):
            yield "".join(letters)


def acceptance_vector(fsa: FiniteAutomaton, words: Sequence[str]) -> np.ndarray:
    return np.array([simulate(word, fsa) for word in words], dtype=bool)


def language_agreement(
    fsa_a: FiniteAutomaton,
    fsa_b: FiniteAutomaton,
    words: Sequence[str],
) -> float:
    """
    Fraction of words on which two automata give the same verdict.

    Args:
        fsa_a: First automaton.
        fsa_b: Second automaton.
        words: Words to test. Must not be empty.

    Returns:
        Agreement in [0, 1]; 1.0 means no tested word separates them.
    """
    if not words:
        raise ValueError("words must not be empty")

    verdicts_a = acceptance_vector(fsa_a, words)
    verdicts_b = acceptance_vector(fsa_b, words)
    return float(np.mean(verdicts_a == verdicts_b))
