"""
pyfsa: finite-state automata (DFA, NFA) and a small regex-to-NFA compiler.
"""

import logging

from pyfsa.core.config import EPSILON, SimulationOptions
from pyfsa.core.dfa import DFA
from pyfsa.core.errors import ErrorCode, FSAError, FSATypeError
from pyfsa.core.nfa import NFA
from pyfsa.core.types import Alphabet, NFATransition, State, Transition
from pyfsa.engine.simulate import simulate, step_once
from pyfsa.regex.compiler import compile_regex
from pyfsa.tasks.factory import create_fsa, create_regex

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Alphabet",
    "DFA",
    "EPSILON",
    "ErrorCode",
    "FSAError",
    "FSATypeError",
    "NFA",
    "NFATransition",
    "SimulationOptions",
    "State",
    "Transition",
    "compile_regex",
    "create_fsa",
    "create_regex",
    "simulate",
    "step_once",
]
