"""In-memory directed graph keyed by vertex identity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .exceptions import DuplicateVertexError, GraphFormatError, InputError

VertexId = Hashable
Weight = int
EdgeTriple = Tuple[VertexId, VertexId, Weight]


@dataclass(frozen=True)
class Edge:
    """Directed arc to ``to`` with a non-negative integer ``weight``.

    ``to`` does not have to be registered in any graph; such edges are
    ignored by the solvers. ``None`` is reserved and rejected as a target.
    """

    to: VertexId
    weight: Weight

    def __post_init__(self) -> None:
        if self.to is None:
            raise InputError("None is not a valid vertex id")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise GraphFormatError(f"non-integer weight {self.weight!r} on edge to {self.to!r}")
        if self.weight < 0:
            raise GraphFormatError(f"negative weight {self.weight} on edge to {self.to!r}")


@dataclass
class Vertex:
    """A vertex identity together with its outgoing edges.

    Vertices order by ``id`` so they can be sorted alongside identities.
    ``None`` is reserved for "no vertex" in solver tables and cannot be an id.

    Examples:
        ```python
        >>> a = Vertex("A")
        >>> a.add_edge("B", 1)
        >>> a.edges
        [Edge(to='B', weight=1)]
        ```
    """

    id: VertexId
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.id is None:
            raise InputError("None is not a valid vertex id")

    def add_edge(self, to: VertexId, weight: Weight) -> None:
        """Append an edge to ``to`` with ``weight``."""
        self.edges.append(Edge(to, weight))

    def out_degree(self) -> int:
        return len(self.edges)

    def __lt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id < other.id


class Graph:
    """Owning registry of vertices keyed by their identity.

    The graph keeps its own copy of every inserted vertex. Solvers resolve
    neighbors through :attr:`vertices` only, never through vertex objects held
    elsewhere.

    Attributes:
        vertices: Mapping from identity to the stored :class:`Vertex`.
    """

    def __init__(self) -> None:
        self.vertices: Dict[VertexId, Vertex] = {}

    def add_vertex(self, vertex: Vertex, *, replace: bool = True) -> None:
        """Insert ``vertex`` under ``vertex.id``.

        Args:
            vertex: Vertex to store. A copy is kept, so later changes to the
                caller's object do not affect the graph.
            replace: When ``True`` (default) an existing vertex with the same
                id is overwritten; edge lists are not merged.

        Raises:
            DuplicateVertexError: If ``replace`` is ``False`` and the id is
                already present.
        """
        if not replace and vertex.id in self.vertices:
            raise DuplicateVertexError(f"vertex {vertex.id!r} already in graph")
        self.vertices[vertex.id] = Vertex(vertex.id, list(vertex.edges))

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeTriple],
        vertices: Iterable[VertexId] = (),
    ) -> "Graph":
        """Create a graph from ``(u, v, w)`` triples.

        Every tail ``u`` becomes a vertex. Heads are registered only when they
        also appear as a tail or in ``vertices``, so a head that never does
        stays a dangling reference.

        Args:
            edges: Iterable of ``(u, v, w)`` tuples.
            vertices: Extra identities to register, e.g. sinks or isolated
                vertices.
        """
        staged: Dict[VertexId, Vertex] = {vid: Vertex(vid) for vid in vertices}
        for u, v, w in edges:
            staged.setdefault(u, Vertex(u)).add_edge(v, w)
        g = cls()
        for vertex in staged.values():
            g.add_vertex(vertex)
        return g

    def get(self, vid: VertexId) -> Optional[Vertex]:
        return self.vertices.get(vid)

    def edges_from(self, vid: VertexId) -> List[Edge]:
        """Return the outgoing edges of ``vid`` (empty if it is not present)."""
        vertex = self.vertices.get(vid)
        return list(vertex.edges) if vertex is not None else []

    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self.vertices.values())

    def __contains__(self, vid: object) -> bool:
        return vid in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        return f"Graph(n={len(self)}, m={self.edge_count()})"


__all__ = ["Edge", "EdgeTriple", "Graph", "Vertex", "VertexId", "Weight"]
