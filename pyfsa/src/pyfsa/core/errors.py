"""
Error taxonomy for pyfsa.

Every failure is raised as an FSAError carrying a symbolic ErrorCode.
Callers dispatch on `.code`, never on the message text.
"""

from __future__ import annotations

from enum import Enum
from typing import NoReturn


class ErrorCode(str, Enum):
    # Structural
    DUPLICATE_STATE_NAMES = "DuplicateStateNames"
    INVALID_STATE_NAME = "InvalidStateName"
    START_STATE_NOT_FOUND = "StartStateNotFound"
    ACCEPTS_NOT_SUBSET = "AcceptsNotSubset"
    DUPLICATE_ALPHABET_VALUE = "DuplicateAlphabetValue"
    INVALID_TYPE = "InvalidType"

    # Transition function
    ORIGIN_STATE_NOT_FOUND = "OriginStateNotFound"
    DEST_STATE_NOT_FOUND = "DestStateNotFound"
    INVALID_INPUT_CHAR = "InvalidInputChar"
    DUPLICATE_TRANSITION_OBJECT = "DuplicateTransitionObject"
    MISSING_REQUIRED_TRANSITION = "MissingRequiredTransition"
    INVALID_TRANSITION_OBJECT = "InvalidTransitionObject"

    # Regex
    INVALID_REGEX_SYNTAX = "InvalidRegexSyntax"

    # Simulation / lookup
    INVALID_INPUT_TYPE = "InvalidInputType"
    INPUT_STATE_NOT_FOUND = "InputStateNotFound"
    INVALID_STATE_ARRAY = "InvalidStateArray"


TYPE_CODES = frozenset({ErrorCode.INVALID_TYPE, ErrorCode.INVALID_INPUT_TYPE})


class FSAError(ValueError):
    """Raised when an automaton or simulation invariant is violated."""

    def __init__(self, code: ErrorCode, detail: str = ""):
        self.code = code
        self.detail = detail
        message = code.value if not detail else f"{code.value}: {detail}"
        super().__init__(message)


class FSATypeError(FSAError, TypeError):
    """FSAError for arguments of the wrong shape."""


def fail(code: ErrorCode, detail: str = "") -> NoReturn:
    if code in TYPE_CODES:
        raise FSATypeError(code, detail)
    raise FSAError(code, detail)
