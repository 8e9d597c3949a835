"""
rxn_path_core: loading, search and path reconstruction on top of rxn_path_repr.

Modules:
  - config: default paths, capacity bounds, layout geometry
  - data_loading: `A -> Type -> B` line parser, file/YAML loaders
  - search: breadth-first predecessor map
  - reconstruct: predecessor map -> labelled ConversionPath
  - planner: start/end queries returning PathResult
  - layout: chain diagram geometry for renderers
"""
from .search import PredecessorMap, bfs_predecessors
from .reconstruct import reconstruct_path, walk_predecessors
from .planner import (
    PathResult,
    ConversionPathFinder,
    build_graph,
    find_conversion_path,
    reachable_compounds,
    message_for,
)
from .layout import ChainLayout, chain_layout
