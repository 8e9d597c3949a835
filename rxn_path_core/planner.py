from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from rxn_path_repr import (
    CompoundNotFound,
    CompoundRegistry,
    ConversionPath,
    PathError,
    PathNotFound,
    Reaction,
    ReactionCatalog,
    ReactionGraph,
)

from . import config
from .reconstruct import reconstruct_path
from .search import bfs_predecessors

MSG_MISSING_INPUT = "Please enter both start and end compounds."
MSG_NOT_FOUND = "Start or end compound not found in the graph."
MSG_NO_PATH = "No conversion path found."

_UNSET = object()


@dataclass
class PathResult:
    """Outcome of one start/end query: a path, or an error tag saying why there is none."""

    found: bool
    path: Optional[ConversionPath] = None
    error: Optional[PathError] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def steps(self) -> int:
        return self.path.num_steps if self.path is not None else 0


def find_conversion_path(graph: ReactionGraph, catalog: ReactionCatalog, start: str, end: str) -> PathResult:
    """
    Minimum-step conversion path from `start` to `end`.

    Unknown names yield CompoundNotFound (start checked first) without
    searching; start == end yields a one-compound path with no steps.
    """
    registry = graph.registry
    s = registry.lookup(start)
    if s is None:
        return PathResult(found=False, error=CompoundNotFound("start", start), extra={"stop_reason": "compound_not_found"})
    e = registry.lookup(end)
    if e is None:
        return PathResult(found=False, error=CompoundNotFound("end", end), extra={"stop_reason": "compound_not_found"})

    if s == e:
        return PathResult(
            found=True,
            path=ConversionPath.single(s, registry.name(s)),
            extra={"stop_reason": "trivial", "visited": 1},
        )

    preds = bfs_predecessors(graph, s, e)
    if not preds.is_visited(e):
        return PathResult(
            found=False,
            error=PathNotFound(start, end),
            extra={"stop_reason": "exhausted", "visited": preds.num_visited},
        )
    path = reconstruct_path(preds, e, graph, catalog)
    return PathResult(found=True, path=path, extra={"stop_reason": "found", "visited": preds.num_visited})


def reachable_compounds(graph: ReactionGraph, start: str) -> Dict[str, int]:
    "Every compound reachable from `start` with its minimum hop count; empty if `start` is unknown."
    s = graph.registry.lookup(start)
    if s is None:
        return {}
    preds = bfs_predecessors(graph, s)
    return {graph.registry.name(i): int(preds.distances[i]) for i in preds.order}


def build_graph(
    reactions: Iterable[Union[Reaction, Tuple[str, str, str]]],
    max_compounds=_UNSET,
    max_reactions=_UNSET,
) -> Tuple[ReactionGraph, ReactionCatalog]:
    "Catalog + frozen graph from triples; raises CapacityExceeded if either bound is passed."
    catalog = ReactionCatalog.from_triples(
        reactions,
        max_reactions=config.max_reactions if max_reactions is _UNSET else max_reactions,
    )
    registry = CompoundRegistry(max_compounds=config.max_compounds if max_compounds is _UNSET else max_compounds)
    graph = ReactionGraph.build(catalog, registry)
    return graph, catalog


class ConversionPathFinder:
    "A loaded dataset answering start/end queries."
    def __init__(self, graph: ReactionGraph, catalog: ReactionCatalog):
        self.graph = graph
        self.catalog = catalog

    @classmethod
    def from_reactions(cls, reactions, max_compounds=_UNSET, max_reactions=_UNSET) -> "ConversionPathFinder":
        graph, catalog = build_graph(reactions, max_compounds=max_compounds, max_reactions=max_reactions)
        return cls(graph, catalog)

    @property
    def registry(self) -> CompoundRegistry:
        return self.graph.registry

    def find(self, start: str, end: str) -> PathResult:
        return find_conversion_path(self.graph, self.catalog, start, end)

    def reachable(self, start: str) -> Dict[str, int]:
        return reachable_compounds(self.graph, start)

    def query(self, start: str, end: str) -> Tuple[Optional[PathResult], str]:
        """Trim raw input, run the search and return (result, message text).

        Empty input returns (None, prompt) and does not search.
        """
        start = (start or "").strip()
        end = (end or "").strip()
        if not start or not end:
            return None, MSG_MISSING_INPUT
        result = self.find(start, end)
        return result, message_for(result)


def message_for(result: PathResult) -> str:
    "Display text for a result: the path lines, or the matching error message."
    if result.found and result.path is not None:
        return result.path.to_text()
    if isinstance(result.error, CompoundNotFound):
        return MSG_NOT_FOUND
    return MSG_NO_PATH
