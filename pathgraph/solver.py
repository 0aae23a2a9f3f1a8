"""Result, configuration and shared state for the shortest-path solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .diagnostics import dangling_edges, require_no_dangling
from .exceptions import AlgorithmError, ConfigError
from .graph import Edge, Graph, Vertex, VertexId
from .logger import Logger, NoopLogger
from .ordering import Distance, PriorityKey

StartLike = Union[Vertex, VertexId]


@dataclass(frozen=True)
class SSSPResult:
    """Distances (and optionally paths) produced by a solver run.

    Attributes:
        source: Start identity.
        distances: Shortest distance for every reached identity. Unreachable
            vertices are absent.
        predecessors: Predecessor of each reached identity when paths were
            tracked, otherwise ``None``.
        paths: Identity sequence from ``source`` to each reached identity when
            paths were tracked, otherwise ``None``.
    """

    source: VertexId
    distances: Dict[VertexId, Distance]
    predecessors: Optional[Dict[VertexId, Optional[VertexId]]] = None
    paths: Optional[Dict[VertexId, List[VertexId]]] = None

    def distance(self, target: VertexId) -> float:
        """Return the distance to ``target`` or ``math.inf`` if unreached."""
        d = self.distances.get(target)
        return math.inf if d is None else d

    def path(self, target: VertexId) -> List[VertexId]:
        """Return the recorded path to ``target`` (empty if unreached).

        Raises:
            AlgorithmError: If the run did not track paths.
        """
        if self.paths is None:
            raise AlgorithmError("paths were not tracked for this run")
        return list(self.paths.get(target, []))


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    algorithm: str
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solvers.

    Attributes:
        track_paths: Record predecessors and paths (heap solver only; the scan
            solver always reports distances only).
        strict: Refuse graphs containing edges to unregistered vertices
            instead of skipping those edges.
        key: Priority key for the heap solver's frontier. ``None`` selects
            :func:`~pathgraph.ordering.by_distance`.
    """

    track_paths: bool = True
    strict: bool = False
    key: Optional[PriorityKey] = None

    def __post_init__(self) -> None:
        if self.key is not None and not callable(self.key):
            raise ConfigError("key must be callable")


class BaseSolver:
    """Common pieces shared by the heap and scan solvers.

    ``start`` may be a :class:`Vertex` or a bare identity. Only its identity
    is used; adjacency always comes from ``G``.

    Raises:
        AlgorithmError: If the start identity is not registered in ``G``.
    """

    algorithm = "base"

    def __init__(
        self,
        G: Graph,
        start: StartLike,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        source = start.id if isinstance(start, Vertex) else start
        if source not in G:
            raise AlgorithmError(f"start vertex {source!r} is not in the graph")
        self.G = G
        self.source: VertexId = source
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self._track = False
        self._reset()

    def _reset(self) -> None:
        self._dist: Dict[VertexId, Distance] = {}
        self._pred: Dict[VertexId, Optional[VertexId]] = {}
        self.counters: Dict[str, int] = {
            "edges_relaxed": 0,
            "edges_skipped": 0,
            "improvements": 0,
        }

    def _prepare(self) -> None:
        self._reset()
        if self.cfg.strict:
            found = dangling_edges(self.G)
            if found:
                self.logger.warning(
                    "dangling_edges", algorithm=self.algorithm, count=len(found), first=found[0][1].to
                )
            require_no_dangling(self.G, found)
        self._dist[self.source] = 0
        if self._track:
            self._pred[self.source] = None

    def _relax(self, u: VertexId, du: Distance, edge: Edge) -> bool:
        """Relax ``edge`` leaving ``u`` at distance ``du``.

        Returns:
            ``True`` if the head's distance strictly improved.
        """
        if edge.to not in self.G.vertices:
            self.counters["edges_skipped"] += 1
            self.logger.debug("skip_dangling", tail=u, head=edge.to)
            return False
        self.counters["edges_relaxed"] += 1
        cand = du + edge.weight
        old = self._dist.get(edge.to)
        if old is not None and cand >= old:
            return False
        self._dist[edge.to] = cand
        if self._track:
            self._pred[edge.to] = u
        self.counters["improvements"] += 1
        return True

    def _log_done(self) -> None:
        if self.counters["edges_skipped"]:
            self.logger.warning(
                "skipped_dangling", algorithm=self.algorithm, count=self.counters["edges_skipped"]
            )
        self.logger.info(
            "solve",
            algorithm=self.algorithm,
            source=self.source,
            n=len(self.G),
            reached=len(self._dist),
            **self.counters,
        )

    def solve(self) -> SSSPResult:  # pragma: no cover - abstract
        raise NotImplementedError

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
            peak_mib: Optional peak memory usage in MiB.
        """
        return SolverMetrics(
            n=len(self.G),
            m=self.G.edge_count(),
            algorithm=self.algorithm,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


__all__ = ["BaseSolver", "SSSPResult", "SolverConfig", "SolverMetrics", "StartLike"]
