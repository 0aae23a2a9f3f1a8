import pytest

from pathgraph.diagnostics import dangling_edges
from pathgraph.exceptions import ConfigError
from pathgraph.generate import MissingVertex, generate_graph


def test_seed_is_deterministic():
    a = generate_graph(n=40, m=120, seed=5)
    b = generate_graph(n=40, m=120, seed=5)
    assert a.edges == b.edges
    assert a.metadata["seed"] == 5


def test_erdos_renyi_sizes_and_weights():
    gen = generate_graph(n=20, m=50, w_min=2, w_max=9, seed=1)
    assert gen.n == 20
    assert gen.m == 50
    assert all(2 <= w <= 9 for _, _, w in gen.edges)
    assert all(u != v for u, v, _ in gen.edges)


def test_backbone_chain_present():
    gen = generate_graph(n=10, m=9, seed=0)
    assert {(u, v) for u, v, _ in gen.edges} == {(i, i + 1) for i in range(9)}


def test_dag_edges_point_forward():
    gen = generate_graph(n=15, m=40, graph_type="dag", seed=2)
    assert all(u < v for u, v, _ in gen.edges)


def test_grid_is_symmetric():
    gen = generate_graph(n=16, graph_type="grid", seed=0)
    pairs = {(u, v) for u, v, _ in gen.edges}
    assert all((v, u) in pairs for u, v in pairs)
    # 4x4 grid: 24 undirected links
    assert len(pairs) == 48


def test_zero_heavy_has_zero_weights():
    gen = generate_graph(n=50, m=200, weight_dist="zero_heavy", seed=0)
    assert any(w == 0 for _, _, w in gen.edges)


def test_dangling_edges_are_unregistered():
    gen = generate_graph(n=10, m=20, dangling=3, seed=4)
    assert len(dangling_edges(gen.graph)) == 3
    assert gen.n == 10


def test_dangling_heads_never_collide_with_labels():
    labels = [("missing", k) for k in range(4)]
    gen = generate_graph(n=4, m=4, labels=labels, dangling=3, seed=2)
    found = dangling_edges(gen.graph)
    assert len(found) == 3
    assert sorted(edge.to for _, edge in found) == [MissingVertex(0), MissingVertex(1), MissingVertex(2)]
    assert set(gen.graph) == set(labels)


def test_labels_map_identities():
    gen = generate_graph(n=3, m=2, labels=["x", "y", "z"], source=1)
    assert set(gen.graph) == {"x", "y", "z"}
    assert gen.source == "y"


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(n=0),
        dict(n=5, source=5),
        dict(n=5, w_min=-1),
        dict(n=5, w_min=4, w_max=3),
        dict(n=5, m=-1),
        dict(n=3, labels=["a", "a", "b"]),
        dict(n=5, graph_type="torus"),
        dict(n=5, weight_dist="gaussian"),
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ConfigError):
        generate_graph(**kwargs)
