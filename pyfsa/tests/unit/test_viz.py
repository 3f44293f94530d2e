"""
Plotting tests. Uses the non-interactive Agg backend.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from pyfsa.viz.plotting import plot_automaton, to_networkx  # noqa: E402


class TestToNetworkx:
    def test_nodes_and_attributes(self, ends_in_one_dfa):
        graph = to_networkx(ends_in_one_dfa)
        assert list(graph.nodes) == ["q1", "q2"]
        assert graph.nodes["q1"]["start"] is True
        assert graph.nodes["q1"]["accept"] is False
        assert graph.nodes["q2"]["accept"] is True

    def test_edges_carry_labels(self, ends_in_one_dfa):
        graph = to_networkx(ends_in_one_dfa)
        assert graph.number_of_edges() == 4
        assert graph.edges["q1", "q2"]["label"] == "1"
        assert graph.edges["q2", "q2"]["label"] == "1"


class TestPlotAutomaton:
    def test_returns_axes(self, third_from_end_nfa):
        fig, ax = plt.subplots()
        try:
            returned = plot_automaton(third_from_end_nfa, title="third from end", ax=ax)
            assert returned is ax
            assert ax.get_title() == "third from end"
        finally:
            plt.close(fig)

    def test_default_title_and_figure(self, ends_in_one_dfa):
        ax = plot_automaton(ends_in_one_dfa)
        try:
            assert ax.get_title() == "DFA"
        finally:
            plt.close(ax.figure)
