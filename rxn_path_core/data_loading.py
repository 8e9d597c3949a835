"""Data loading: reaction triples from `A -> Type -> B` lines, named queries from YAML."""
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

import yaml

from rxn_path_repr import Reaction, ReactionCatalog
from . import config

ARROW = "->"

DEFAULT_REACTIONS = [
    Reaction("CH4", "Oxidation", "CH3OH"),
    Reaction("CH3OH", "Oxidation", "HCHO"),
    Reaction("HCHO", "Oxidation", "HCOOH"),
    Reaction("HCOOH", "Oxidation", "CO2"),
]

_UNSET = object()


def parse_reaction_line(line: str) -> Optional[Reaction]:
    """
    Parse one `<reactant> -> <reaction type> -> <product>` line.

    Whitespace around each field is dropped. Everything after the second
    arrow is the product. Returns None for blank lines, lines starting with `#`, lines
    with fewer than two arrows and lines with an empty field.
    """
    s = line.strip()
    if not s or s.startswith("#"):
        return None
    parts = s.split(ARROW, 2)
    if len(parts) < 3:
        return None
    reactant, reaction_type, product = (p.strip() for p in parts)
    if not reactant or not reaction_type or not product:
        return None
    return Reaction(reactant, reaction_type, product)


def iter_reactions(lines: Iterable[str], skipped: Optional[List[str]] = None) -> Iterator[Reaction]:
    "Yield parsed reactions; malformed non-blank, non-comment lines go to `skipped` if given."
    for ln in lines:
        rxn = parse_reaction_line(ln)
        if rxn is None:
            s = ln.strip()
            if skipped is not None and s and not s.startswith("#"):
                skipped.append(s)
            continue
        yield rxn


def load_reactions(path: Union[str, Path]) -> List[Reaction]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Reactions file not found: {p}")
    skipped: List[str] = []
    with open(p, "r", encoding="utf-8") as f:
        out = list(iter_reactions(f, skipped=skipped))
    if skipped:
        print(f"[load_reactions] skipped malformed lines: {len(skipped)}, kept: {len(out)}")
    return out


def load_catalog(path: Union[str, Path], max_reactions=_UNSET) -> ReactionCatalog:
    "Load a file into a ReactionCatalog; raises CapacityExceeded if it holds too many reactions."
    bound = config.max_reactions if max_reactions is _UNSET else max_reactions
    return ReactionCatalog.from_triples(load_reactions(path), max_reactions=bound)


def load_or_default(path: Union[str, Path, None] = None) -> List[Reaction]:
    "Reactions from `path` (default data/reactions.txt), or the built-in methane chain if it is missing."
    p = Path(path) if path else config.reactions_file
    if not p.exists():
        print(f"[load_reactions] unable to open {p}, using default reactions.")
        return list(DEFAULT_REACTIONS)
    return load_reactions(p)


def load_queries(path: Union[str, Path, None] = None) -> List[Dict[str, Optional[str]]]:
    """Load named start/end queries (and optional reactions file) from YAML.

    Expected shape::

        methane:
          start: CH4
          end: CO2
          reactions: reactions.txt   # optional, relative to the YAML file
    """
    p = Path(path) if path else config.queries_file
    if not p.exists():
        raise FileNotFoundError(f"Query config not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    queries = []
    if isinstance(data, dict):
        for name, entry in data.items():
            if not isinstance(entry, dict):
                continue
            start = entry.get("start")
            end = entry.get("end")
            if start is None or end is None:
                continue
            rxn_file = entry.get("reactions")
            if rxn_file:
                rp = Path(rxn_file)
                rxn_file = str(rp if rp.is_absolute() else p.parent / rp)
            queries.append(
                {
                    "name": str(name),
                    "start": str(start).strip(),
                    "end": str(end).strip(),
                    "reactions": rxn_file,
                }
            )
    if not queries:
        raise ValueError(f"No queries with 'start' and 'end' found in {p}")
    return queries
