"""Utilities for reconstructing paths from predecessor tables."""

from __future__ import annotations

from typing import Dict, List, Optional

from .exceptions import AlgorithmError
from .graph import VertexId


def reconstruct_path(
    predecessors: Dict[VertexId, Optional[VertexId]],
    source: VertexId,
    target: VertexId,
) -> List[VertexId]:
    """Return the path from ``source`` to ``target`` using a predecessor table.

    Args:
        predecessors: Predecessor of each reached vertex; the source maps to
            ``None``.
        source: Start identity.
        target: Target identity.

    Returns:
        Identities from source to target (inclusive), or an empty list if
        ``target`` was not reached.

    Raises:
        AlgorithmError: If the table contains a cycle.
    """
    if target not in predecessors:
        return []
    if source == target:
        return [source]

    # Walk backwards from target to source
    chain: List[VertexId] = []
    seen = set()
    cur: Optional[VertexId] = target
    while cur is not None:
        if cur in seen:
            raise AlgorithmError(f"predecessor cycle through {cur!r}")
        seen.add(cur)
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        cur = predecessors.get(cur)
    return []


def all_paths(
    predecessors: Dict[VertexId, Optional[VertexId]],
    source: VertexId,
) -> Dict[VertexId, List[VertexId]]:
    """Reconstruct the path to every vertex in ``predecessors``.

    Shares prefixes through a memo so the whole table costs one pass per
    distinct vertex.
    """
    memo: Dict[VertexId, List[VertexId]] = {}
    if source in predecessors:
        memo[source] = [source]
    for target in predecessors:
        if target in memo:
            continue
        stack: List[VertexId] = []
        cur: Optional[VertexId] = target
        while cur is not None and cur not in memo:
            if cur in stack:
                raise AlgorithmError(f"predecessor cycle through {cur!r}")
            stack.append(cur)
            cur = predecessors.get(cur)
        base = memo[cur] if cur is not None else []
        while stack:
            v = stack.pop()
            base = base + [v]
            memo[v] = base
    return memo


__all__ = ["all_paths", "reconstruct_path"]
