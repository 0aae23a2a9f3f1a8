"""Custom exception types used across :mod:`pathgraph`."""

from __future__ import annotations


class PathGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(PathGraphError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class GraphFormatError(InputError):
    """Raised when an edge carries a negative or non-integer weight."""


class DuplicateVertexError(InputError):
    """Raised by strict insertion when a vertex id is already registered."""


class DanglingEdgeError(InputError):
    """Raised in strict mode when an edge points at a vertex outside the graph."""


class ConfigError(PathGraphError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(PathGraphError, RuntimeError):
    """Raised when a solver is used outside its contract."""


__all__ = [
    "PathGraphError",
    "InputError",
    "GraphFormatError",
    "DuplicateVertexError",
    "DanglingEdgeError",
    "ConfigError",
    "AlgorithmError",
]
