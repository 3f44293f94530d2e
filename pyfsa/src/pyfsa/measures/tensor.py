"""
Dense transition tensor export.

Axis order follows fsa.alphabet.sigma (symbols) and fsa.state_order()
(states), so index 0 on the state axes is always the start state.
"""

from __future__ import annotations

import numpy as np

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.core.types import State


def state_index(fsa: FiniteAutomaton) -> dict[State, int]:
    return {state: idx for idx, state in enumerate(fsa.state_order())}


def transition_tensor(fsa: FiniteAutomaton) -> np.ndarray:
    """
    Boolean tensor T with T[a, i, j] set when state i moves to j on symbol a.

    For a DFA every (a, i) row holds exactly one True; NFA rows may hold
    zero or many, and the ε slice (when present) holds the ε-transitions.

    Returns:
        Array of shape (|Σ|, |Q|, |Q|), dtype bool.
    """
    states = state_index(fsa)
    symbols = {symbol: idx for idx, symbol in enumerate(fsa.alphabet.sigma)}

    tensor = np.zeros((len(symbols), len(states), len(states)), dtype=bool)
    for transition in fsa.transitions:
        tensor[symbols[transition.input], states[transition.origin], states[transition.dest]] = True
    return tensor


def accept_mask(fsa: FiniteAutomaton) -> np.ndarray:
    order = fsa.state_order()
    return np.array([state in fsa.accepts for state in order], dtype=bool)
