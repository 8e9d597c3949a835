from __future__ import annotations
from typing import Iterator, List, Tuple

import numpy as np

from .compounds import CompoundRegistry
from .reactions import ReactionCatalog


class ReactionGraph:
    """
    Directed, unweighted graph over compound indices.

    Edges are presence-only (a boolean adjacency matrix); several reactions
    between the same pair collapse to one edge and labels stay in the catalog.
    The matrix grows with the registry; the registry bound is the only limit.
    """
    def __init__(self, registry: CompoundRegistry, initial_capacity: int = 16):
        self.registry = registry
        cap = max(int(initial_capacity), len(registry), 1)
        self._adj = np.zeros((cap, cap), dtype=bool)
        self._frozen = False

    @classmethod
    def build(cls, catalog: ReactionCatalog, registry: CompoundRegistry) -> "ReactionGraph":
        graph = cls(registry)
        for rxn in catalog:
            # product first, then reactant: keeps index order of existing datasets
            v = registry.register(rxn.product)
            u = registry.register(rxn.reactant)
            graph.add_edge(u, v)
        graph.freeze()
        catalog.freeze()
        registry.freeze()
        return graph

    def _ensure_capacity(self, n: int) -> None:
        cap = self._adj.shape[0]
        if n <= cap:
            return
        new_cap = cap
        while new_cap < n:
            new_cap *= 2
        grown = np.zeros((new_cap, new_cap), dtype=bool)
        grown[:cap, :cap] = self._adj
        self._adj = grown

    def _check_index(self, i: int) -> None:
        if i < 0 or i >= len(self.registry):
            raise IndexError(f"compound index {i} out of range (registered: {len(self.registry)})")

    def add_edge(self, u: int, v: int) -> None:
        if self._frozen:
            raise RuntimeError("graph is frozen; mutate before searching or build a new graph")
        self._check_index(u)
        self._check_index(v)
        self._ensure_capacity(len(self.registry))
        self._adj[u, v] = True

    def has_edge(self, u: int, v: int) -> bool:
        n = len(self.registry)
        if not (0 <= u < n and 0 <= v < n) or u >= self._adj.shape[0] or v >= self._adj.shape[0]:
            return False
        return bool(self._adj[u, v])

    def neighbors(self, u: int) -> List[int]:
        "Successors of u in ascending index order."
        self._check_index(u)
        if u >= self._adj.shape[0]:
            return []
        n = min(len(self.registry), self._adj.shape[0])
        return [int(i) for i in np.flatnonzero(self._adj[u, :n])]

    def in_neighbors(self, v: int) -> List[int]:
        "Predecessors of v in ascending index order."
        self._check_index(v)
        if v >= self._adj.shape[0]:
            return []
        n = min(len(self.registry), self._adj.shape[0])
        return [int(i) for i in np.flatnonzero(self._adj[:n, v])]

    def edges(self) -> Iterator[Tuple[int, int]]:
        n = min(len(self.registry), self._adj.shape[0])
        us, vs = np.nonzero(self._adj[:n, :n])
        for u, v in zip(us, vs):
            yield int(u), int(v)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def num_compounds(self) -> int:
        return len(self.registry)

    @property
    def num_edges(self) -> int:
        return int(np.count_nonzero(self._adj))
