"""
Graphviz DOT output for automata.

The source is handed to an external renderer; nothing here draws pixels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from graphviz import Digraph

from pyfsm.core.automaton import Automaton
from pyfsm.core.simulate import test_input


@dataclass(frozen=True)
class DotOptions:
    """Visual attributes of the rendered graph."""

    rankdir: str = "LR"
    accept_peripheries: int = 2
    highlight_color: str = "#f54f4c"
    font_name: Optional[str] = None

    def __post_init__(self):
        valid_rankdirs = {"LR", "RL", "TB", "BT"}
        if self.rankdir not in valid_rankdirs:
            raise ValueError(f"rankdir must be in {valid_rankdirs}")
        if self.accept_peripheries < 1:
            raise ValueError("accept_peripheries must be >= 1")
        if not self.highlight_color:
            raise ValueError("highlight_color must not be empty")


def to_digraph(
    automaton: Automaton,
    highlight: Optional[str] = None,
    options: Optional[DotOptions] = None,
) -> Digraph:
    """
    Build a graphviz Digraph for an automaton.

    Args:
        automaton: Automaton to render.
        highlight: State to fill, e.g. the terminal state of a simulation.
        options: Visual attributes, defaults to DotOptions().

    Returns:
        Digraph with one node per state and one edge per state pair.
    """
    options = options or DotOptions()
    if highlight is not None and highlight not in automaton.states:
        raise ValueError(f"highlight references unknown state: {highlight}")

    font = {"fontname": options.font_name} if options.font_name else None
    dot = Digraph(
        graph_attr={"rankdir": options.rankdir},
        node_attr=font,
        edge_attr=font,
    )

    for state in automaton.states:
        attrs: dict[str, str] = {}
        if automaton.is_accepting(state):
            attrs["peripheries"] = str(options.accept_peripheries)
        if state == highlight:
            attrs["style"] = "filled"
            attrs["fillcolor"] = options.highlight_color
        dot.node(state, **attrs)

    for edge in automaton.transitions():
        dot.edge(edge.source, edge.target, label=edge.label)

    return dot


def to_dot(
    automaton: Automaton,
    highlight: Optional[str] = None,
    options: Optional[DotOptions] = None,
) -> str:
    """DOT source text of :func:`to_digraph`."""
    return to_digraph(automaton, highlight=highlight, options=options).source


def render_simulation(
    automaton: Automaton,
    word: str,
    options: Optional[DotOptions] = None,
) -> str:
    """DOT text with the terminal state of a run over ``word`` highlighted."""
    return to_dot(automaton, highlight=test_input(automaton, word), options=options)
