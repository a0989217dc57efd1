"""Shared fixtures."""

import pytest

from steinerkit.graph.store import Graph


@pytest.fixture()
def example_graph():
    """A-B, A-F, B-C, C-D, B-E, E-D, E-F."""
    g = Graph()
    g.add_edge("A", "B", "AB_Connection")
    g.add_edge("A", "F", "AF_Connection")
    g.add_edge("B", "C", "BC_Connection")
    g.add_edge("C", "D", "CD_Connection")
    g.add_edge("B", "E", "BE_Connection")
    g.add_edge("E", "D", "ED_Connection")
    g.add_edge("E", "F", "EF_Connection")
    return g


@pytest.fixture()
def h_graph():
    """
    Two terminal pairs joined by a long bar::

        t1       t3
          \\     /
           x-m1-m2-y
          /         \\
        t2           t4
    """
    g = Graph()
    for u, v in [("t1", "x"), ("t2", "x"), ("x", "m1"), ("m1", "m2"),
                 ("m2", "y"), ("y", "t3"), ("y", "t4")]:
        g.add_edge(u, v)
    return g
