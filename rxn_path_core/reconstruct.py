"""Turn a BFS predecessor map into a labelled conversion path."""
from __future__ import annotations

from typing import List

from rxn_path_repr import (
    ConversionPath,
    InternalInvariantViolation,
    PathStep,
    ReactionCatalog,
    ReactionGraph,
)

from . import config
from .search import PredecessorMap


def walk_predecessors(preds: PredecessorMap, end: int) -> List[int]:
    "Indices from preds.origin to end. Raises InternalInvariantViolation on a broken chain."
    if not preds.is_visited(end):
        raise InternalInvariantViolation(f"end index {end} was not visited by the search from {preds.origin}")
    chain: List[int] = []
    current = end
    # a valid chain visits each index at most once
    limit = len(preds.parents)
    while current is not None:
        chain.append(current)
        if len(chain) > limit:
            raise InternalInvariantViolation(f"predecessor cycle detected while walking back from {end}")
        if current != preds.origin and not preds.is_visited(current):
            raise InternalInvariantViolation(f"predecessor chain from {end} passes unvisited index {current}")
        current = preds.parent(current)
    if chain[-1] != preds.origin:
        raise InternalInvariantViolation(
            f"predecessor chain from {end} stops at {chain[-1]}, not at origin {preds.origin}"
        )
    chain.reverse()
    return chain


def reconstruct_path(
    preds: PredecessorMap,
    end: int,
    graph: ReactionGraph,
    catalog: ReactionCatalog,
    unknown_label: str = config.unknown_label,
) -> ConversionPath:
    indices = walk_predecessors(preds, end)
    registry = graph.registry
    names = [registry.name(i) for i in indices]
    steps: List[PathStep] = []
    for (u, v), (a, b) in zip(zip(indices, indices[1:]), zip(names, names[1:])):
        label = catalog.find_label(u, v, registry)
        if label is None:
            steps.append(PathStep(a, unknown_label, b, resolved=False))
        else:
            steps.append(PathStep(a, label, b))
    return ConversionPath(indices=indices, compounds=names, steps=steps)
