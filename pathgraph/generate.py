"""Seeded random graphs for tests and benchmarks.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Uniformly sampled directed edges. Average-case baseline.
2. dag
   Edges only from lower to higher index. Shortest paths have limited depth.
3. grid
   2D grid, neighbors linked in both directions. Many equal-cost paths,
   which exercises tie handling in both solvers.

WEIGHT DISTRIBUTIONS
--------------------
- uniform: integers drawn evenly from ``[w_min, w_max]``
- small_int: weights packed into ``[w_min, w_min + 10]`` (many ties)
- zero_heavy: half of all edges cost 0

Vertex identities are the integers ``0 .. n-1`` unless ``labels`` is given.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Sequence, Set, Tuple

from .exceptions import ConfigError
from .graph import EdgeTriple, Graph, VertexId

WeightDist = Literal["uniform", "small_int", "zero_heavy"]
GraphType = Literal["erdos_renyi", "dag", "grid"]


@dataclass(frozen=True)
class GeneratedGraph:
    """A generated graph plus the parameters that produced it."""

    graph: Graph
    source: VertexId
    edges: List[EdgeTriple]
    metadata: Dict[str, object] = field(default_factory=dict)

    @property
    def n(self) -> int:
        return len(self.graph)

    @property
    def m(self) -> int:
        return len(self.edges)


@dataclass(frozen=True, order=True)
class MissingVertex:
    """Head of a generated dangling edge. Never equal to a label or index."""

    index: int


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: int, w_max: int) -> int:
    if dist == "uniform":
        return rng.randint(w_min, w_max)
    if dist == "small_int":
        return rng.randint(w_min, min(w_max, w_min + 10))
    if dist == "zero_heavy":
        return 0 if rng.random() < 0.5 else rng.randint(w_min, w_max)
    raise ConfigError(f"unknown weight distribution: {dist}")


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    source: int = 0,
    allow_self_loops: bool = False,
    ensure_weakly_connected: bool = True,
    dangling: int = 0,
    labels: Optional[Sequence[VertexId]] = None,
) -> GeneratedGraph:
    """Generate a directed graph with non-negative integer weights.

    Notes:
    - ``ensure_weakly_connected`` adds a backbone chain ``i -> i+1`` so the
      instance is not trivially fragmented (ignored for grids).
    - ``dangling`` adds that many extra edges to :class:`MissingVertex`
      heads, which are never registered, for exercising the skip path.

    Args:
        n: Number of vertices.
        m: Target edge count; defaults to ``4 * n`` capped at the maximum.
        graph_type: One of :data:`GraphType`.
        weight_dist: One of :data:`WeightDist`.
        w_min: Smallest weight (``>= 0``).
        w_max: Largest weight (``>= w_min``).
        seed: Seed for :class:`random.Random`.
        source: Index of the start vertex.
        allow_self_loops: Permit ``u -> u`` edges.
        ensure_weakly_connected: Add the backbone chain.
        dangling: Number of edges to unregistered identities.
        labels: Optional identities for the ``n`` vertices, in index order.

    Raises:
        ConfigError: On inconsistent parameters.
    """
    if n <= 0:
        raise ConfigError("n must be > 0.")
    if not (0 <= source < n):
        raise ConfigError("source must be in [0, n).")
    if w_min < 0:
        raise ConfigError("w_min must be >= 0.")
    if w_max < w_min:
        raise ConfigError("w_max must be >= w_min.")
    if labels is not None and len(set(labels)) != n:
        raise ConfigError("labels must hold n distinct identities.")
    if m is not None and m < 0:
        raise ConfigError("m must be >= 0.")

    rng = random.Random(seed)
    max_m = n * n if allow_self_loops else n * (n - 1)
    if m is None:
        m = min(4 * n, max_m)

    seen: Set[Tuple[int, int]] = set()
    edges: List[Tuple[int, int, int]] = []

    def add_edge(u: int, v: int) -> None:
        if not allow_self_loops and u == v:
            return
        if (u, v) in seen:
            return
        seen.add((u, v))
        edges.append((u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    if ensure_weakly_connected and graph_type != "grid":
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "erdos_renyi":
        target = min(m, max_m)
        while len(edges) < target:
            add_edge(rng.randrange(n), rng.randrange(n))

    elif graph_type == "dag":
        target = min(m, n * (n - 1) // 2)
        while len(edges) < target:
            u, v = rng.randrange(n), rng.randrange(n)
            if u == v:
                continue
            add_edge(min(u, v), max(u, v))

    elif graph_type == "grid":
        cols = max(1, math.isqrt(n))
        for u in range(n):
            c = u % cols
            if c + 1 < cols and u + 1 < n:
                add_edge(u, u + 1)
                add_edge(u + 1, u)
            if u + cols < n:
                add_edge(u, u + cols)
                add_edge(u + cols, u)

    else:
        raise ConfigError(f"unknown graph_type: {graph_type}")

    ids: List[VertexId] = list(labels) if labels is not None else list(range(n))
    triples: List[EdgeTriple] = [(ids[u], ids[v], w) for u, v, w in edges]
    for k in range(dangling):
        tail = ids[rng.randrange(n)]
        triples.append((tail, MissingVertex(k), _sample_weight(rng, weight_dist, w_min, w_max)))

    return GeneratedGraph(
        graph=Graph.from_edges(triples, vertices=ids),
        source=ids[source],
        edges=triples,
        metadata={
            "graph_type": graph_type,
            "weight_dist": weight_dist,
            "w_min": w_min,
            "w_max": w_max,
            "seed": seed,
            "ensure_weakly_connected": ensure_weakly_connected,
            "allow_self_loops": allow_self_loops,
            "dangling": dangling,
        },
    )


__all__ = ["GeneratedGraph", "GraphType", "MissingVertex", "WeightDist", "generate_graph"]
