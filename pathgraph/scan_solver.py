"""Linear-scan Dijkstra solver without a heap."""

from __future__ import annotations

from typing import Optional, Set

from .graph import VertexId
from .solver import BaseSolver, SSSPResult


class ScanDijkstraSolver(BaseSolver):
    """Dijkstra that picks the next vertex by scanning every unvisited one.

    Runs in ``O(n^2 + m)`` and reports distances only. Every registered vertex
    is visited exactly once, vertices with no known distance last; those
    relax nothing, so unreachable vertices stay out of the result.
    """

    algorithm = "scan"

    def _reset(self) -> None:
        super()._reset()
        self.counters.update({"scans": 0, "candidates_examined": 0})

    def _next_vertex(self, visited: Set[VertexId]) -> Optional[VertexId]:
        """Return the unvisited vertex with the smallest known distance.

        Vertices without a distance are only chosen when no unvisited vertex
        has one. Returns ``None`` once everything is visited.
        """
        best: Optional[VertexId] = None
        best_d: Optional[int] = None
        for vid in self.G.vertices:
            if vid in visited:
                continue
            self.counters["candidates_examined"] += 1
            d = self._dist.get(vid)
            if best is None:
                best, best_d = vid, d
            elif d is not None and (best_d is None or d < best_d):
                best, best_d = vid, d
        return best

    def solve(self) -> SSSPResult:
        self._prepare()
        visited: Set[VertexId] = set()
        current = self.source
        total = len(self.G)

        while len(visited) < total:
            visited.add(current)
            self.counters["scans"] += 1
            du = self._dist.get(current)
            if du is not None:
                for edge in self.G.vertices[current].edges:
                    self._relax(current, du, edge)
            nxt = self._next_vertex(visited)
            if nxt is None:
                break
            current = nxt

        self._log_done()
        return SSSPResult(source=self.source, distances=dict(self._dist))


__all__ = ["ScanDijkstraSolver"]
