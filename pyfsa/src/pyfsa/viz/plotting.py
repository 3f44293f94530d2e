"""Plotting utilities for automata (networkx + matplotlib)."""

from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx

from pyfsa.core.automaton import FiniteAutomaton
from pyfsa.viz.digraph import edge_labels

ACCEPT_COLOR = "#59A14F"
STATE_COLOR = "skyblue"
START_COLOR = "orange"


def to_networkx(fsa: FiniteAutomaton) -> nx.DiGraph:
    """
    Convert an automaton into a labelled networkx DiGraph.

    Nodes are state names with boolean `start` and `accept` attributes.
    Parallel transitions share one edge whose `label` lists their symbols,
    as in the digraph text output.
    """
    graph = nx.DiGraph()
    for state in fsa.state_order():
        graph.add_node(state.name, start=state is fsa.start, accept=state in fsa.accepts)
    for (origin, dest), label in edge_labels(fsa.transitions).items():
        graph.add_edge(origin.name, dest.name, label=label)
    return graph


def plot_automaton(
    fsa: FiniteAutomaton,
    title: str | None = None,
    ax=None,
):
    """
    Draw an automaton's state diagram.

    Args:
        fsa: DFA or NFA to draw.
        title: Plot title. Defaults to the automaton kind.
        ax: Matplotlib axes object (optional). A new figure is created
            when omitted.

    Returns:
        The axes drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    graph = to_networkx(fsa)
    pos = nx.circular_layout(graph) if len(graph) > 1 else {fsa.start.name: (0.0, 0.0)}

    node_colors = [
        START_COLOR if data["start"] else ACCEPT_COLOR if data["accept"] else STATE_COLOR
        for _, data in graph.nodes(data=True)
    ]
    accept_nodes = [node for node, data in graph.nodes(data=True) if data["accept"]]

    nx.draw_networkx_nodes(graph, pos, ax=ax, node_color=node_colors, node_size=700)
    # Outer ring marks accept states
    nx.draw_networkx_nodes(
        graph,
        pos,
        ax=ax,
        nodelist=accept_nodes,
        node_color="none",
        edgecolors="black",
        node_size=1000,
    )
    nx.draw_networkx_labels(graph, pos, ax=ax, font_size=10, font_weight="bold")
    nx.draw_networkx_edges(
        graph,
        pos,
        ax=ax,
        arrows=True,
        arrowstyle="-|>",
        edge_color="gray",
        node_size=700,
        connectionstyle="arc3,rad=0.1",
    )
    nx.draw_networkx_edge_labels(
        graph,
        pos,
        ax=ax,
        edge_labels=nx.get_edge_attributes(graph, "label"),
        font_size=9,
    )

    ax.set_title(title if title is not None else fsa.kind, fontsize=14, fontweight="bold")
    ax.set_axis_off()
    return ax
