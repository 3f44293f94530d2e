"""
Regex to NFA compiler (simplified Thompson construction).

Each literal, with its optional postfix operator, becomes a small fragment
with one entry and one exit state:

    a       s -a-> e
    a%s     s -a-> e,  s -ε-> e,  e -ε-> s
    a%p     p -a-> s,  then the a%s fragment on s, e

Fragments of a branch are chained exit -ε-> entry, and the last exit of
each branch is accepting. The start state q0 links to every branch entry
with ε. State names are q1..qn in creation order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pyfsa.core.config import EPSILON, RESERVED_SYMBOLS, START_STATE_NAME, STATE_NAME_PREFIX
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.nfa import NFA
from pyfsa.core.types import Alphabet, NFATransition, State
from pyfsa.regex.tokenizer import Token, TokenKind, split_union, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fragment:
    entry: State
    exit: State


class _NFABuilder:
    def __init__(self):
        self.states: list[State] = []
        self.transitions: list[NFATransition] = []
        self.accepts: list[State] = []

    def new_state(self) -> State:
        state = State(f"{STATE_NAME_PREFIX}{len(self.states) + 1}")
        self.states.append(state)
        return state

    def link(self, origin: State, dest: State, symbol: str) -> None:
        self.transitions.append(NFATransition(origin, (dest,), symbol))

    def literal(self, symbol: str) -> Fragment:
        entry, exit_ = self.new_state(), self.new_state()
        self.link(entry, exit_, symbol)
        return Fragment(entry, exit_)

    def star(self, symbol: str) -> Fragment:
        entry, exit_ = self.new_state(), self.new_state()
        self.link(entry, exit_, symbol)
        self.link(entry, exit_, EPSILON)
        self.link(exit_, entry, EPSILON)
        return Fragment(entry, exit_)

    def plus(self, symbol: str) -> Fragment:
        head = self.new_state()
        loop = self.star(symbol)
        self.link(head, loop.entry, symbol)
        return Fragment(head, loop.exit)

    def branch(self, tokens: list[Token]) -> Fragment:
        fragments: list[Fragment] = []
        i = 0
        while i < len(tokens):
            symbol = tokens[i].text
            postfix = tokens[i + 1].kind if i + 1 < len(tokens) else None
            if postfix is TokenKind.STAR:
                fragments.append(self.star(symbol))
                i += 2
            elif postfix is TokenKind.PLUS:
                fragments.append(self.plus(symbol))
                i += 2
            else:
                fragments.append(self.literal(symbol))
                i += 1

        for previous, current in zip(fragments, fragments[1:]):
            self.link(previous.exit, current.entry, EPSILON)

        self.accepts.append(fragments[-1].exit)
        return Fragment(fragments[0].entry, fragments[-1].exit)


def compile_regex(pattern: str, alphabet: Alphabet) -> NFA:
    """
    Compile a token pattern into an equivalent NFA.

    Args:
        pattern: Pattern string using literal symbols and %s, %p, %u tokens.
        alphabet: Σ for the pattern. Must not contain reserved symbols.

    Returns:
        An NFA accepting the language of the pattern. The empty pattern
        yields a single accepting start state (language {ε}).

    Raises:
        FSAError(INVALID_TYPE): pattern is not a str or alphabet is not an Alphabet.
        FSAError(INVALID_INPUT_CHAR): alphabet contains a reserved symbol.
        FSAError(INVALID_REGEX_SYNTAX): malformed pattern.

    Examples:
        >>> nfa = compile_regex("0%s10%s", Alphabet("01"))
        >>> sorted(state.name for state in nfa.accepts)
        ['q6']
    """
    if not isinstance(pattern, str):
        fail(ErrorCode.INVALID_TYPE, f"pattern must be a str, got {type(pattern).__name__}")
    if not isinstance(alphabet, Alphabet):
        fail(ErrorCode.INVALID_TYPE, f"alphabet must be an Alphabet, got {type(alphabet).__name__}")

    reserved = sorted(RESERVED_SYMBOLS.intersection(alphabet.sigma))
    if reserved:
        fail(ErrorCode.INVALID_INPUT_CHAR, f"alphabet contains reserved symbols {reserved}")

    branches = split_union(tokenize(pattern, alphabet))

    if branches == [[]]:
        start = State(START_STATE_NAME)
        logger.debug("Compiled empty pattern to a single accepting state")
        return NFA([start], alphabet, [], start, [start])

    builder = _NFABuilder()
    entries = [builder.branch(tokens).entry for tokens in branches]
    start = State(START_STATE_NAME)
    for entry in entries:
        builder.link(start, entry, EPSILON)

    logger.debug(
        "Compiled %r: %d branches, %d states",
        pattern,
        len(branches),
        len(builder.states) + 1,
    )
    return NFA(
        builder.states + [start],
        alphabet,
        builder.transitions,
        start,
        builder.accepts,
    )
