# demo_utils.py
from pathlib import Path
from typing import List, Optional, Tuple, Union

from rxn_path_core import ConversionPathFinder, config
from rxn_path_core.data_loading import DEFAULT_REACTIONS, load_or_default
from rxn_path_repr import Reaction

_UNSET = object()


def build_world_methane() -> Tuple[ConversionPathFinder, str, str]:
    "The bundled methane oxidation chain with its default query."
    finder = ConversionPathFinder.from_reactions(DEFAULT_REACTIONS)
    return finder, "CH4", "CO2"


def build_world_branched() -> Tuple[ConversionPathFinder, str, str]:
    """Two equally short routes (via CH3OH and via CH3Cl) plus a longer detour.

    CH3Cl is introduced after CH3OH, so the route through CH3OH wins the tie.
    """
    reactions = [
        Reaction("CH4", "Oxidation", "CH3OH"),
        Reaction("CH4", "Chlorination", "CH3Cl"),
        Reaction("CH3Cl", "Hydrolysis", "CH3OH"),
        Reaction("CH3OH", "Oxidation", "HCHO"),
        Reaction("CH3Cl", "Elimination", "HCHO"),
        Reaction("HCHO", "Oxidation", "HCOOH"),
        Reaction("HCOOH", "Decarboxylation", "CO2"),
        Reaction("HCHO", "Combustion", "CO2"),
    ]
    return ConversionPathFinder.from_reactions(reactions), "CH4", "CO2"


def load_world(
    reactions_path: Union[str, Path, None] = None,
    max_compounds=_UNSET,
    max_reactions=_UNSET,
) -> ConversionPathFinder:
    """Finder over a reactions file (or the default chain if the file is missing).

    Bounds left unset follow config at call time; None means unbounded.
    """
    if max_compounds is _UNSET:
        max_compounds = config.max_compounds
    if max_reactions is _UNSET:
        max_reactions = config.max_reactions
    reactions: List[Reaction] = load_or_default(reactions_path)
    return ConversionPathFinder.from_reactions(
        reactions, max_compounds=max_compounds, max_reactions=max_reactions
    )


def format_result(finder: ConversionPathFinder, start: str, end: str, as_json: bool = False) -> Tuple[bool, str]:
    result, message = finder.query(start, end)
    if result is None or not result.found:
        return False, message
    if as_json:
        return True, result.path.to_json()
    if result.path.num_steps == 0:
        return True, f"{result.path.start} (no reaction needed)\n"
    return True, message


def resolve_bound(value: Optional[int], unbounded: bool, default: Optional[int]) -> Optional[int]:
    if unbounded:
        return None
    return default if value is None else int(value)
