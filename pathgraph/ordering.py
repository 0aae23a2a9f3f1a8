"""Ordering glue for the priority-queue solver."""

from __future__ import annotations

import functools
import heapq
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from .graph import VertexId

Distance = int


@dataclass(frozen=True)
class QueueEntry:
    """A tentative ``distance`` for ``vertex``; ``seq`` is the insertion index."""

    distance: Distance
    vertex: VertexId
    seq: int


PriorityKey = Callable[[QueueEntry], Any]


def by_distance(entry: QueueEntry) -> Tuple[Distance, int]:
    """Smallest distance first, ties in insertion order."""
    return (entry.distance, entry.seq)


def by_distance_then_id(entry: QueueEntry) -> Tuple[Distance, VertexId, int]:
    """Smallest distance first, ties by vertex id.

    Requires identities that compare against each other.
    """
    return (entry.distance, entry.vertex, entry.seq)


def from_comparator(cmp: Callable[[QueueEntry, QueueEntry], int]) -> PriorityKey:
    """Turn a three-way comparator into a :data:`PriorityKey`."""
    return functools.cmp_to_key(cmp)


class HeapFrontier:
    """Binary-heap min-priority queue ordered by an injectable key.

    Entries are never updated in place; callers push a new entry whenever a
    distance improves and drop stale ones on pop.

    Args:
        key: Maps an entry to its sort key, :func:`by_distance` by default.
    """

    def __init__(self, key: PriorityKey | None = None) -> None:
        self.key = key or by_distance
        self._heap: List[Tuple[Any, int, QueueEntry]] = []
        self._seq = 0

    def push(self, distance: Distance, vertex: VertexId) -> None:
        entry = QueueEntry(distance, vertex, self._seq)
        heapq.heappush(self._heap, (self.key(entry), self._seq, entry))
        self._seq += 1

    def pop(self) -> QueueEntry:
        """Remove and return the entry with the smallest key.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


__all__ = [
    "Distance",
    "HeapFrontier",
    "PriorityKey",
    "QueueEntry",
    "by_distance",
    "by_distance_then_id",
    "from_comparator",
]
