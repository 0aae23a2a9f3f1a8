"""Priority-queue (binary heap) Dijkstra solver."""

from __future__ import annotations

from typing import Optional, Set

from .graph import Graph, VertexId
from .logger import Logger
from .ordering import HeapFrontier
from .path import all_paths
from .solver import BaseSolver, SolverConfig, SSSPResult, StartLike


class HeapDijkstraSolver(BaseSolver):
    """Dijkstra with a min-heap frontier and lazy deletion.

    With ``config.track_paths`` the result also carries the identity sequence
    realizing every distance. Among equal-cost paths the one found first wins;
    which one that is depends on edge order and the frontier's tie-break key.

    Examples:
        ```python
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 4)], vertices=["C"])
        >>> res = HeapDijkstraSolver(g, "A").solve()
        >>> res.distances["C"], res.path("C")
        (3, ['A', 'B', 'C'])
        ```
    """

    algorithm = "heap"

    def __init__(
        self,
        G: Graph,
        start: StartLike,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(G, start, config=config, logger=logger)
        self._track = self.cfg.track_paths

    def _reset(self) -> None:
        super()._reset()
        self.counters.update({"pops": 0, "stale_pops": 0, "max_frontier_size": 0})

    def solve(self) -> SSSPResult:
        self._prepare()
        dist = self._dist
        frontier = HeapFrontier(self.cfg.key)
        frontier.push(0, self.source)
        visited: Set[VertexId] = set()
        max_frontier = 1

        while frontier:
            max_frontier = max(max_frontier, len(frontier))
            entry = frontier.pop()
            self.counters["pops"] += 1
            # lazy deletion
            if entry.vertex in visited:
                self.counters["stale_pops"] += 1
                continue
            visited.add(entry.vertex)
            u = entry.vertex
            for edge in self.G.vertices[u].edges:
                if self._relax(u, entry.distance, edge):
                    frontier.push(dist[edge.to], edge.to)

        self.counters["max_frontier_size"] = max_frontier
        self._log_done()
        if not self._track:
            return SSSPResult(source=self.source, distances=dict(dist))
        return SSSPResult(
            source=self.source,
            distances=dict(dist),
            predecessors=dict(self._pred),
            paths=all_paths(self._pred, self.source),
        )


__all__ = ["HeapDijkstraSolver"]
