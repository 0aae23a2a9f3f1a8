"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from pathgraph import Graph, Vertex


@pytest.fixture
def diamond() -> Graph:
    """A->B(1), A->C(4), B->C(2), B->D(5), C->D(1)."""
    g = Graph()
    a = Vertex("A")
    a.add_edge("B", 1)
    a.add_edge("C", 4)
    b = Vertex("B")
    b.add_edge("C", 2)
    b.add_edge("D", 5)
    c = Vertex("C")
    c.add_edge("D", 1)
    for v in (a, b, c, Vertex("D")):
        g.add_vertex(v)
    return g


@pytest.fixture
def dangling() -> Graph:
    """A points at B and at Z, which is never inserted."""
    g = Graph()
    a = Vertex("A")
    a.add_edge("Z", 1)
    a.add_edge("B", 2)
    g.add_vertex(a)
    g.add_vertex(Vertex("B"))
    return g


@pytest.fixture
def disconnected() -> Graph:
    """Two components: A->B and C->D."""
    return Graph.from_edges([("A", "B", 3), ("C", "D", 1)], vertices=["B", "D"])
