from pathgraph import Graph
from pathgraph.convert import reference_distances, to_networkx


def test_to_networkx_copies_weights(diamond):
    nxg = to_networkx(diamond)
    assert set(nxg.nodes) == {"A", "B", "C", "D"}
    assert nxg["A"]["C"]["weight"] == 4
    assert nxg.number_of_edges() == 5


def test_parallel_edges_collapse_to_cheapest():
    g = Graph.from_edges([("a", "b", 5), ("a", "b", 1), ("a", "b", 3)], vertices=["b"])
    assert to_networkx(g)["a"]["b"]["weight"] == 1


def test_dangling_heads(dangling):
    assert "Z" not in to_networkx(dangling)
    nxg = to_networkx(dangling, include_dangling=True)
    assert nxg.nodes["Z"]["dangling"] is True
    assert nxg["A"]["Z"]["weight"] == 1


def test_reference_distances(diamond):
    assert reference_distances(diamond, "A") == {"A": 0, "B": 1, "C": 3, "D": 4}
