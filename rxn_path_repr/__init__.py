"""
rxn_path_repr: Representation of reaction catalogs and conversion paths.

Modules:
  - compounds: compound name <-> dense index registry
  - reactions: reaction triples and the ordered reaction catalog
  - graph: directed reaction graph over compound indices
  - path: conversion path value (steps + text/JSON output)
  - errors: capacity/invariant exceptions and search outcome tags
  - validation: graph-level and path-level consistency checks
"""
from .errors import (
    CapacityExceeded,
    InternalInvariantViolation,
    PathError,
    CompoundNotFound,
    PathNotFound,
)
from .compounds import CompoundRegistry
from .reactions import Reaction, ReactionCatalog
from .graph import ReactionGraph
from .path import PathStep, ConversionPath, UNKNOWN_LABEL
from .validation import GraphChecks, PathChecks
