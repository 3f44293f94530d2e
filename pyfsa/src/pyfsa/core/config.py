"""
Configuration for pyfsa: reserved symbols, regex tokens and simulation options.
"""

from __future__ import annotations

from dataclasses import dataclass

# The empty symbol. Rendered as EPSILON_LABEL in digraph output.
EPSILON = ""
EPSILON_LABEL = "ε"

# Regex token syntax: ESCAPE followed by one token character.
ESCAPE = "%"
STAR_TOKEN = "s"
PLUS_TOKEN = "p"
UNION_TOKEN = "u"

RESERVED_SYMBOLS = frozenset({ESCAPE})

START_STATE_NAME = "q0"
STATE_NAME_PREFIX = "q"


@dataclass(frozen=True)
class SimulationOptions:
    """Options for simulate() and step_once()."""

    return_states: bool = False
    trace: bool = False

    def __post_init__(self):
        """Validate option types."""
        if not isinstance(self.return_states, bool):
            raise TypeError("return_states must be a bool")
        if not isinstance(self.trace, bool):
            raise TypeError("trace must be a bool")
