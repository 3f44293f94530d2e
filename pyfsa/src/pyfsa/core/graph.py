"""
Graph utilities shared by DFA and NFA.

- link_graph: Build the state link graph of a transition function
- state_order: Pre-order traversal of the link graph from the start state
- find_dead_states: States unreachable from the start state
- remove_dead_states: Prune dead states from Q, F and δ

Transition labels are ignored here: reachability is plain graph
reachability over δ.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import networkx as nx

from pyfsa.core.types import State, Transition

logger = logging.getLogger(__name__)


def link_graph(transitions: Iterable[Transition]) -> nx.DiGraph:
    """
    Build a directed graph of origin -> dest links.

    Parallel transitions between the same pair collapse into one edge.
    Outgoing edges keep the insertion order of the transitions, which
    fixes the order of traversal.
    """
    graph = nx.DiGraph()
    for transition in transitions:
        graph.add_edge(transition.origin, transition.dest)
    return graph


def state_order(start: State, transitions: Iterable[Transition]) -> list[State]:
    """
    List states reachable from start, first-discovered first.

    Depth-first pre-order, following each state's outgoing links in the
    order they appear in δ. Iterative, so deep automata do not hit the
    recursion limit.

    Args:
        start: Start state q0.
        transitions: The transition function δ.

    Returns:
        Reachable states, beginning with start.
    """
    graph = link_graph(transitions)
    graph.add_node(start)
    return list(nx.dfs_preorder_nodes(graph, source=start))


def find_dead_states(
    states: Iterable[State],
    start: State,
    transitions: Iterable[Transition],
) -> list[State]:
    reachable = set(state_order(start, transitions))
    return [state for state in states if state not in reachable]


def remove_dead_states(
    states: set[State],
    start: State,
    accepts: set[State],
    transitions: Iterable[Transition],
) -> list[Transition]:
    """
    Remove states unreachable from start.

    Mutates states and accepts in place. Returns the transitions that do
    not touch a dead state, in their original order.

    Args:
        states: Q, pruned in place.
        start: q0.
        accepts: F, pruned in place.
        transitions: δ.

    Returns:
        δ restricted to live states.
    """
    transitions = list(transitions)
    dead = find_dead_states(states, start, transitions)
    if not dead:
        return transitions

    logger.warning(
        "Dead states detected, removing them and associated transitions: %s",
        sorted(state.name for state in dead),
    )
    dead_set = set(dead)
    states.difference_update(dead_set)
    accepts.difference_update(dead_set)
    return [t for t in transitions if t.origin not in dead_set and t.dest not in dead_set]
