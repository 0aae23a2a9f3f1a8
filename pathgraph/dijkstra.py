"""Function-style entry points for the two solvers."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from .graph import Graph, VertexId
from .heap_solver import HeapDijkstraSolver
from .logger import Logger
from .ordering import Distance, PriorityKey
from .scan_solver import ScanDijkstraSolver
from .solver import SolverConfig, StartLike

PathTable = Dict[VertexId, Tuple[Distance, List[VertexId]]]
DistanceTable = Dict[VertexId, Distance]


def shortest_paths_via_queue(
    G: Graph,
    start: StartLike,
    track_paths: bool = True,
    *,
    key: Optional[PriorityKey] = None,
    strict: bool = False,
    logger: Logger | None = None,
) -> Union[PathTable, DistanceTable]:
    """Run the heap solver from ``start``.

    Args:
        G: Graph with non-negative integer weights.
        start: Start vertex or its identity.
        track_paths: Return ``{id: (distance, path)}`` when ``True``,
            ``{id: distance}`` otherwise.
        key: Optional frontier priority key.
        strict: Raise on edges pointing outside ``G``.
        logger: Optional structured logger.

    Returns:
        A table covering every vertex reachable from ``start``.
    """
    cfg = SolverConfig(track_paths=track_paths, strict=strict, key=key)
    res = HeapDijkstraSolver(G, start, config=cfg, logger=logger).solve()
    if not track_paths:
        return res.distances
    return {vid: (d, res.path(vid)) for vid, d in res.distances.items()}


def shortest_paths_via_scan(
    G: Graph,
    start: StartLike,
    *,
    strict: bool = False,
    logger: Logger | None = None,
) -> DistanceTable:
    """Run the linear-scan solver from ``start`` and return ``{id: distance}``."""
    cfg = SolverConfig(track_paths=False, strict=strict)
    return ScanDijkstraSolver(G, start, config=cfg, logger=logger).solve().distances


__all__ = ["DistanceTable", "PathTable", "shortest_paths_via_queue", "shortest_paths_via_scan"]
