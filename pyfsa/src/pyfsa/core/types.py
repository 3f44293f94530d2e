"""
Core types for pyfsa: Alphabet, State, Transition, NFATransition.

Pure data containers with validation. No behavior logic.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from pyfsa.core.config import EPSILON
from pyfsa.core.errors import ErrorCode, fail


@dataclass(frozen=True)
class Alphabet:
    """
    Alphabet: an ordered, duplicate-free sequence of input symbols (Σ).

    Accepts a string (split into characters) or a sequence of symbol strings.
    Immutable: sigma is stored as a tuple.
    """

    sigma: tuple[str, ...]

    def __post_init__(self):
        """Normalize sigma to a tuple and reject duplicates."""
        raw = self.sigma
        if isinstance(raw, str):
            symbols = tuple(raw)
        elif isinstance(raw, Sequence) and all(isinstance(s, str) for s in raw):
            symbols = tuple(raw)
        else:
            fail(ErrorCode.INVALID_TYPE, f"alphabet must be a str or sequence of str, got {type(raw).__name__}")

        counts = Counter(symbols)
        repeated = sorted(symbol for symbol, count in counts.items() if count > 1)
        if repeated:
            fail(ErrorCode.DUPLICATE_ALPHABET_VALUE, f"repeated symbols {repeated}")

        object.__setattr__(self, "sigma", symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.sigma

    def __iter__(self):
        return iter(self.sigma)

    def __len__(self) -> int:
        return len(self.sigma)

    def with_epsilon(self) -> Alphabet:
        """Return this alphabet with ε appended, or self if already present."""
        if EPSILON in self.sigma:
            return self
        return Alphabet(self.sigma + (EPSILON,))


@dataclass(frozen=True, eq=False)
class State:
    """
    A named automaton node.

    Identity-compared: two State objects are distinct even when their names
    match. Duplicate names are caught when an automaton is constructed.
    """

    name: str

    def __post_init__(self):
        """Validate the state name."""
        if not isinstance(self.name, str) or not self.name:
            fail(ErrorCode.INVALID_STATE_NAME, f"state name must be a non-empty str, got {self.name!r}")


@dataclass(frozen=True)
class Transition:
    """One-to-one edge: origin x input -> dest."""

    origin: State
    dest: State
    input: str


@dataclass(frozen=True)
class NFATransition:
    """
    One-to-many edge used as NFA construction input.

    Expanded into one Transition per destination by the NFA constructor.
    """

    origin: State
    dest: tuple[State, ...]
    input: str

    def __post_init__(self):
        """Normalize dest to a tuple of states."""
        dest = self.dest
        if isinstance(dest, State):
            dest = (dest,)
        object.__setattr__(self, "dest", tuple(dest))

    def expand(self) -> list[Transition]:
        return [Transition(self.origin, dest, self.input) for dest in self.dest]
