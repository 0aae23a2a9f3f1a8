"""Invariants checked on generated graphs for both solvers."""

import random

import networkx as nx
import pytest

from pathgraph import Graph, HeapDijkstraSolver, ScanDijkstraSolver, Vertex
from pathgraph.convert import reference_distances, to_networkx
from pathgraph.generate import generate_graph

CASES = [
    dict(n=30, m=90, graph_type="erdos_renyi", weight_dist="uniform"),
    dict(n=30, m=60, graph_type="erdos_renyi", weight_dist="zero_heavy", ensure_weakly_connected=False),
    dict(n=25, m=80, graph_type="dag", weight_dist="small_int"),
    dict(n=36, graph_type="grid", weight_dist="small_int", w_min=0, w_max=3),
    dict(n=20, m=40, graph_type="erdos_renyi", weight_dist="uniform", dangling=5),
]


@pytest.fixture(params=[(case, seed) for case in CASES for seed in (0, 1, 2)])
def generated(request):
    case, seed = request.param
    return generate_graph(seed=seed, **case)


def test_cross_algorithm_agreement(generated):
    heap = HeapDijkstraSolver(generated.graph, generated.source).solve()
    scan = ScanDijkstraSolver(generated.graph, generated.source).solve()
    assert heap.distances == scan.distances


def test_zero_self_distance(generated):
    for solver_cls in (HeapDijkstraSolver, ScanDijkstraSolver):
        assert solver_cls(generated.graph, generated.source).solve().distances[generated.source] == 0


def test_matches_networkx(generated):
    heap = HeapDijkstraSolver(generated.graph, generated.source).solve()
    assert heap.distances == reference_distances(generated.graph, generated.source)


def test_relaxation_closure(generated):
    dist = HeapDijkstraSolver(generated.graph, generated.source).solve().distances
    for u, vertex in generated.graph.vertices.items():
        if u not in dist:
            continue
        for edge in vertex.edges:
            if edge.to in generated.graph:
                assert dist[edge.to] <= dist[u] + edge.weight


def test_path_distance_consistency(generated):
    G = generated.graph
    res = HeapDijkstraSolver(G, generated.source).solve()
    for target, d in res.distances.items():
        path = res.path(target)
        assert path[0] == generated.source
        assert path[-1] == target
        cost = 0
        for u, v in zip(path, path[1:]):
            cost += min(e.weight for e in G.vertices[u].edges if e.to == v)
        assert cost == d


def test_unreachable_absent(generated):
    nxg = to_networkx(generated.graph)
    reachable = nx.descendants(nxg, generated.source) | {generated.source}
    for solver_cls in (HeapDijkstraSolver, ScanDijkstraSolver):
        assert set(solver_cls(generated.graph, generated.source).solve().distances) == reachable


def test_edge_order_independence(generated):
    rng = random.Random(7)
    shuffled = Graph()
    for vid, vertex in generated.graph.vertices.items():
        edges = list(vertex.edges)
        rng.shuffle(edges)
        shuffled.add_vertex(Vertex(vid, edges))
    for solver_cls in (HeapDijkstraSolver, ScanDijkstraSolver):
        before = solver_cls(generated.graph, generated.source).solve().distances
        after = solver_cls(shuffled, generated.source).solve().distances
        assert before == after


def test_character_identities():
    gen = generate_graph(n=26, m=70, seed=3, labels=[chr(ord("A") + i) for i in range(26)])
    heap = HeapDijkstraSolver(gen.graph, "A").solve()
    scan = ScanDijkstraSolver(gen.graph, "A").solve()
    assert gen.source == "A"
    assert heap.distances == scan.distances
