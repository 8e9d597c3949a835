import pytest

from rxn_path_core import ConversionPathFinder
from rxn_path_core.data_loading import DEFAULT_REACTIONS
from rxn_path_repr import CompoundRegistry, ReactionCatalog, ReactionGraph


METHANE_TRIPLES = [(r.reactant, r.reaction_type, r.product) for r in DEFAULT_REACTIONS]


@pytest.fixture
def methane_catalog():
    return ReactionCatalog.from_triples(METHANE_TRIPLES)


@pytest.fixture
def methane_graph(methane_catalog):
    registry = CompoundRegistry()
    return ReactionGraph.build(methane_catalog, registry)


@pytest.fixture
def methane_finder():
    return ConversionPathFinder.from_reactions(METHANE_TRIPLES)


def make_graph(triples, max_compounds=None):
    catalog = ReactionCatalog.from_triples(triples)
    graph = ReactionGraph.build(catalog, CompoundRegistry(max_compounds=max_compounds))
    return graph, catalog
