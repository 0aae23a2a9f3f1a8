"""Conversion to NetworkX for interop and cross-checking."""

from __future__ import annotations

from typing import Dict

import networkx as nx

from .graph import Graph, VertexId


def to_networkx(G: Graph, include_dangling: bool = False) -> nx.DiGraph:
    """Return a :class:`networkx.DiGraph` view of ``G`` with ``weight`` attributes.

    Parallel edges collapse to the cheapest one. Edges to unregistered
    identities are dropped unless ``include_dangling`` is set, in which case
    their heads become extra nodes flagged ``dangling=True``.
    """
    nxg = nx.DiGraph()
    nxg.add_nodes_from(G.vertices)
    for u, vertex in G.vertices.items():
        for edge in vertex.edges:
            if edge.to not in G.vertices:
                if not include_dangling:
                    continue
                nxg.add_node(edge.to, dangling=True)
            if nxg.has_edge(u, edge.to) and nxg[u][edge.to]["weight"] <= edge.weight:
                continue
            nxg.add_edge(u, edge.to, weight=edge.weight)
    return nxg


def reference_distances(G: Graph, source: VertexId) -> Dict[VertexId, int]:
    """Distances from ``source`` computed by NetworkX's Dijkstra."""
    return dict(nx.single_source_dijkstra_path_length(to_networkx(G), source, weight="weight"))


__all__ = ["reference_distances", "to_networkx"]
