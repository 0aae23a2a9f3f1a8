"""Optional strict checks for graphs that the solvers otherwise tolerate."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .exceptions import DanglingEdgeError
from .graph import Edge, Graph, VertexId


def dangling_edges(G: Graph) -> List[Tuple[VertexId, Edge]]:
    """Return every ``(tail, edge)`` whose head is not registered in ``G``.

    Examples:
        ```python
        >>> g = Graph.from_edges([("A", "Z", 3)])
        >>> dangling_edges(g)
        [('A', Edge(to='Z', weight=3))]
        ```
    """
    return [
        (vid, edge)
        for vid, vertex in G.vertices.items()
        for edge in vertex.edges
        if edge.to not in G.vertices
    ]


def require_no_dangling(G: Graph, found: Optional[List[Tuple[VertexId, Edge]]] = None) -> None:
    """Raise :class:`DanglingEdgeError` naming the first few dangling edges.

    ``found`` may carry a list already computed by :func:`dangling_edges`.
    """
    if found is None:
        found = dangling_edges(G)
    if not found:
        return
    shown = ", ".join(f"{u!r}->{e.to!r}" for u, e in found[:5])
    more = f" (+{len(found) - 5} more)" if len(found) > 5 else ""
    raise DanglingEdgeError(f"{len(found)} edge(s) point outside the graph: {shown}{more}")


__all__ = ["dangling_edges", "require_no_dangling"]
