"""Graphviz digraph text for automata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyfsa.core.config import EPSILON, EPSILON_LABEL
from pyfsa.core.types import State, Transition

if TYPE_CHECKING:
    from pyfsa.core.automaton import FiniteAutomaton


def edge_labels(transitions: tuple[Transition, ...]) -> dict[tuple[State, State], str]:
    """
    Group transitions sharing an origin and dest into one label.

    Symbols are sorted and comma-joined; ε is spelled out. Pairs keep the
    order in which they first appear in δ.
    """
    grouped: dict[tuple[State, State], list[str]] = {}
    for transition in transitions:
        symbol = EPSILON_LABEL if transition.input == EPSILON else transition.input
        grouped.setdefault((transition.origin, transition.dest), []).append(symbol)
    return {pair: ",".join(sorted(symbols)) for pair, symbols in grouped.items()}


def generate_digraph(fsa: FiniteAutomaton) -> str:
    """
    Render an automaton as Graphviz DOT text.

    Nodes are listed in traversal order from the start state, accept states
    drawn as double circles, and a point node `qi` points at the start.
    """
    lines = ["digraph fsa {"]
    for state in fsa.state_order():
        if state in fsa.accepts:
            lines.append(f"\t{state.name} [shape = doublecircle];")
        else:
            lines.append(f"\t{state.name}")

    lines.append("\trankdir=LR;")
    lines.append("\tnode [shape = point ]; qi;")
    lines.append("\tnode [shape = circle];")
    lines.append(f"\tqi -> {fsa.start.name};")

    for (origin, dest), label in edge_labels(fsa.transitions).items():
        lines.append(f'\t{origin.name} -> {dest.name} [ label = "{label}" ];')

    lines.append("}")
    return "\n".join(lines) + "\n"
