"""Public package exports for :mod:`pathgraph`."""

from __future__ import annotations

from .diagnostics import dangling_edges
from .dijkstra import shortest_paths_via_queue, shortest_paths_via_scan
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DanglingEdgeError,
    DuplicateVertexError,
    GraphFormatError,
    InputError,
    PathGraphError,
)
from .graph import Edge, Graph, Vertex, VertexId
from .heap_solver import HeapDijkstraSolver
from .logger import Logger, NoopLogger, StdLogger
from .ordering import HeapFrontier, by_distance, by_distance_then_id, from_comparator
from .scan_solver import ScanDijkstraSolver
from .solver import SolverConfig, SolverMetrics, SSSPResult

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "VertexId",
    "HeapDijkstraSolver",
    "ScanDijkstraSolver",
    "SSSPResult",
    "SolverConfig",
    "SolverMetrics",
    "shortest_paths_via_queue",
    "shortest_paths_via_scan",
    "dangling_edges",
    "HeapFrontier",
    "by_distance",
    "by_distance_then_id",
    "from_comparator",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "PathGraphError",
    "InputError",
    "GraphFormatError",
    "DuplicateVertexError",
    "DanglingEdgeError",
    "ConfigError",
    "AlgorithmError",
]
