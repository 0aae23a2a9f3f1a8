"""Draw a graph with its shortest-path tree highlighted.

Example usage:

```python
from pathgraph import Graph
from pathgraph.visualize import draw_shortest_path_tree

g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 4)], vertices=["C"])
ax = draw_shortest_path_tree(g, "A", show_weights=True)
ax.figure.savefig("tree.png")
```
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from .convert import to_networkx
from .graph import Graph, Vertex, VertexId
from .heap_solver import HeapDijkstraSolver
from .solver import SolverConfig, SSSPResult, StartLike

LAYOUTS = ("spring", "circular", "shell")


def downsample_edges(
    edges: Iterable[Tuple[VertexId, VertexId]],
    max_edges: int,
    seed: int = 0,
) -> List[Tuple[VertexId, VertexId]]:
    """Randomly sample edges if the graph is too large to draw legibly."""
    edges = list(edges)
    if len(edges) <= max_edges:
        return edges
    rng = random.Random(seed)
    return rng.sample(edges, max_edges)


def tree_edges(result: SSSPResult) -> List[Tuple[VertexId, VertexId]]:
    """Return the ``(predecessor, vertex)`` pairs of a path-tracking result."""
    if result.predecessors is None:
        return []
    return [(p, v) for v, p in result.predecessors.items() if p is not None]


def draw_shortest_path_tree(
    G: Graph,
    start: StartLike,
    result: Optional[SSSPResult] = None,
    *,
    layout: str = "spring",
    show_weights: bool = False,
    max_edges: int = 300,
    node_size: int = 300,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Render ``G`` using NetworkX + Matplotlib.

    The start vertex is red, reached vertices blue and unreached ones grey.
    Edges of the shortest-path tree are drawn thick; non-tree edges are
    downsampled to ``max_edges``.

    Args:
        G: Graph to draw. Dangling edges are not drawn.
        start: Start vertex or identity.
        result: A path-tracking result for ``start``; computed when omitted.
            Its ``source`` must be the identity of ``start``.
        layout: One of ``"spring"``, ``"circular"`` or ``"shell"``.
        show_weights: Label edges with their weights.
        max_edges: Cap on the number of non-tree edges drawn.
        node_size: Marker size for vertices.
        ax: Axes to draw into; a new figure is created when omitted.

    Returns:
        The axes holding the drawing.

    Raises:
        ValueError: On an unknown ``layout`` or a ``result`` from another start.
    """
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout: {layout}")
    source = start.id if isinstance(start, Vertex) else start
    if result is None:
        result = HeapDijkstraSolver(G, start, config=SolverConfig(track_paths=True)).solve()
    elif result.source != source:
        raise ValueError(f"result was computed from {result.source!r}, not {source!r}")

    nxg = to_networkx(G)
    if layout == "spring":
        pos = nx.spring_layout(nxg, seed=42)
    elif layout == "circular":
        pos = nx.circular_layout(nxg)
    else:
        pos = nx.shell_layout(nxg)

    if ax is None:
        _, ax = plt.subplots(figsize=(12, 10))

    node_colors = [
        "tab:red" if v == source else "tab:blue" if v in result.distances else "tab:gray"
        for v in nxg.nodes
    ]
    nx.draw_networkx_nodes(nxg, pos, node_color=node_colors, node_size=node_size, alpha=0.9, ax=ax)

    tree = tree_edges(result)
    tree_set = set(tree)
    others = downsample_edges((e for e in nxg.edges if e not in tree_set), max_edges)
    if others:
        nx.draw_networkx_edges(
            nxg, pos, edgelist=others, arrowstyle="->", arrowsize=12, width=1.0, alpha=0.4, ax=ax
        )
    if tree:
        nx.draw_networkx_edges(
            nxg, pos, edgelist=tree, arrowstyle="->", arrowsize=14, width=2.5, edge_color="tab:red", ax=ax
        )

    labels = {
        v: f"{v}\n{result.distances[v]}" if v in result.distances else str(v) for v in nxg.nodes
    }
    nx.draw_networkx_labels(nxg, pos, labels=labels, font_size=8, ax=ax)

    if show_weights:
        shown = tree + others
        edge_labels = {(u, v): nxg[u][v]["weight"] for u, v in shown}
        nx.draw_networkx_edge_labels(nxg, pos, edge_labels=edge_labels, font_size=7, ax=ax)

    ax.set_title(f"Shortest-path tree from {source}", fontsize=14)
    ax.axis("off")
    return ax


__all__ = ["downsample_edges", "draw_shortest_path_tree", "tree_edges"]
