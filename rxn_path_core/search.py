"""Breadth-first search over the reaction graph."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from rxn_path_repr import ReactionGraph


@dataclass
class PredecessorMap:
    """
    Result of one BFS run from `origin`.

    parents[i] is the index i was first reached from; None for the origin
    and for compounds never visited. distances[i] is the hop count, -1 if
    unvisited. Only meaningful for the graph snapshot that produced it.
    """
    origin: int
    parents: List[Optional[int]]
    visited: np.ndarray
    distances: np.ndarray
    order: List[int] = field(default_factory=list)

    def is_visited(self, index: int) -> bool:
        return 0 <= index < len(self.parents) and bool(self.visited[index])

    def parent(self, index: int) -> Optional[int]:
        return self.parents[index]

    def distance(self, index: int) -> Optional[int]:
        if not self.is_visited(index):
            return None
        return int(self.distances[index])

    @property
    def num_visited(self) -> int:
        return int(np.count_nonzero(self.visited))


def bfs_predecessors(graph: ReactionGraph, start: int, end: Optional[int] = None) -> PredecessorMap:
    """
    Shortest hop-count predecessors from `start`.

    Neighbors are expanded in ascending index order, so ties between equally
    short paths always resolve the same way. With `end` given the search
    stops as soon as `end` is dequeued; otherwise every reachable compound
    is visited.
    """
    n = graph.num_compounds
    if start < 0 or start >= n:
        raise IndexError(f"start index {start} out of range (registered: {n})")

    parents: List[Optional[int]] = [None] * n
    visited = np.zeros(n, dtype=bool)
    distances = np.full(n, -1, dtype=np.int64)
    order: List[int] = []

    queue = deque([start])
    visited[start] = True
    distances[start] = 0

    while queue:
        current = queue.popleft()
        order.append(current)
        if end is not None and current == end:
            break
        for nxt in graph.neighbors(current):
            if not visited[nxt]:
                visited[nxt] = True
                parents[nxt] = current
                distances[nxt] = distances[current] + 1
                queue.append(nxt)

    return PredecessorMap(origin=start, parents=parents, visited=visited, distances=distances, order=order)
