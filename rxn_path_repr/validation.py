from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .compounds import CompoundRegistry
from .graph import ReactionGraph
from .path import ConversionPath
from .reactions import ReactionCatalog


@dataclass
class GraphChecks:
    "Graph-level checks (registry consistency + edge backing)."
    @staticmethod
    def registry_is_bijection(registry: CompoundRegistry) -> bool:
        names = registry.names()
        if len(set(names)) != len(names):
            return False
        return all(registry.lookup(name) == i for i, name in enumerate(names))

    @staticmethod
    def unlabelled_edges(graph: ReactionGraph, catalog: ReactionCatalog) -> List[Tuple[int, int]]:
        "Edges with no backing catalog entry; empty for any graph made by ReactionGraph.build."
        return [
            (u, v) for u, v in graph.edges()
            if catalog.find_label(u, v, graph.registry) is None
        ]


@dataclass
class PathChecks:
    "Path-level checks (connectivity + edge existence)."
    @staticmethod
    def connectivity_ok(path: ConversionPath) -> bool:
        return all(
            s.reactant == path.compounds[i] and s.product == path.compounds[i + 1]
            for i, s in enumerate(path.steps)
        )

    @staticmethod
    def edges_exist(path: ConversionPath, graph: ReactionGraph) -> bool:
        return all(graph.has_edge(u, v) for u, v in zip(path.indices, path.indices[1:]))

    @staticmethod
    def evaluate(path: ConversionPath, graph: ReactionGraph) -> Tuple[bool, Dict[str, Any]]:
        names_match = all(
            graph.registry.lookup(name) == idx for idx, name in zip(path.indices, path.compounds)
        )
        connectivity = PathChecks.connectivity_ok(path)
        edges = PathChecks.edges_exist(path, graph)
        unknown_steps = [i for i, s in enumerate(path.steps) if not s.resolved]
        diag = dict(
            names_match=names_match,
            connectivity=connectivity,
            edges_exist=edges,
            unknown_steps=unknown_steps,
        )
        return names_match and connectivity and edges, diag
