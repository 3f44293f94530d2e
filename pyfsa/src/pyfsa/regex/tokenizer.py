"""
Regex tokenizer.

Scans a pattern left to right into a flat token list. Two-character
tokens are introduced by the ESCAPE marker:

    %s  zero-or-more (postfix)
    %p  one-or-more (postfix)
    %u  union (infix, lowest precedence)

Any other character must be a symbol of the alphabet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pyfsa.core.config import ESCAPE, PLUS_TOKEN, STAR_TOKEN, UNION_TOKEN
from pyfsa.core.errors import ErrorCode, fail
from pyfsa.core.types import Alphabet


class TokenKind(Enum):
    LITERAL = "literal"
    STAR = "star"
    PLUS = "plus"
    UNION = "union"


_ESCAPES = {
    STAR_TOKEN: TokenKind.STAR,
    PLUS_TOKEN: TokenKind.PLUS,
    UNION_TOKEN: TokenKind.UNION,
}
_POSTFIX = frozenset({TokenKind.STAR, TokenKind.PLUS})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


def tokenize(pattern: str, alphabet: Alphabet) -> list[Token]:
    """
    Split a pattern into tokens and check postfix placement.

    Raises:
        FSAError(INVALID_REGEX_SYNTAX): dangling escape, unknown escape,
            postfix with nothing to bind to, stacked postfix, or a literal
            outside the alphabet.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == ESCAPE:
            if i == len(pattern) - 1:
                fail(ErrorCode.INVALID_REGEX_SYNTAX, f"dangling {ESCAPE!r} at end of pattern")
            code = pattern[i + 1]
            kind = _ESCAPES.get(code)
            if kind is None:
                fail(ErrorCode.INVALID_REGEX_SYNTAX, f"unknown token {ESCAPE + code!r} at position {i}")
            token = Token(kind, ESCAPE + code)
            i += 2
        else:
            if char not in alphabet:
                fail(ErrorCode.INVALID_REGEX_SYNTAX, f"symbol {char!r} at position {i} is not in the alphabet")
            token = Token(TokenKind.LITERAL, char)
            i += 1

        if token.kind in _POSTFIX:
            previous = tokens[-1].kind if tokens else None
            if previous in _POSTFIX:
                fail(ErrorCode.INVALID_REGEX_SYNTAX, f"stacked postfix operator {token.text!r}")
            if previous is not TokenKind.LITERAL:
                fail(ErrorCode.INVALID_REGEX_SYNTAX, f"postfix operator {token.text!r} has no preceding symbol")

        tokens.append(token)
    return tokens


def split_union(tokens: list[Token]) -> list[list[Token]]:
    """
    Split tokens into union branches.

    N union tokens give N + 1 branches. An empty branch is only allowed
    when there is no union at all (the empty pattern).
    """
    branches: list[list[Token]] = [[]]
    for token in tokens:
        if token.kind is TokenKind.UNION:
            branches.append([])
        else:
            branches[-1].append(token)

    if len(branches) > 1 and any(not branch for branch in branches):
        fail(ErrorCode.INVALID_REGEX_SYNTAX, "union has an empty alternative")
    return branches
