from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

from .errors import CapacityExceeded

if TYPE_CHECKING:  # pragma: no cover
    from .compounds import CompoundRegistry


@dataclass(frozen=True)
class Reaction:
    "One catalog entry: reactant --[reaction_type]--> product."
    reactant: str
    reaction_type: str
    product: str

    def to_line(self) -> str:
        return f"{self.reactant} -> {self.reaction_type} -> {self.product}"


class ReactionCatalog:
    """
    Reactions exactly as supplied: insertion order kept, duplicates and
    contradictory labels kept. Label lookups use the first matching entry.
    """
    def __init__(self, max_reactions: Optional[int] = None):
        if max_reactions is not None and max_reactions < 0:
            raise ValueError(f"max_reactions must be >= 0, got {max_reactions}")
        self.max_reactions = max_reactions
        self._reactions: List[Reaction] = []
        self._frozen = False

    def append(self, reactant: str, reaction_type: str, product: str) -> Reaction:
        if self._frozen:
            raise RuntimeError("catalog is frozen; build a new catalog to add reactions")
        if self.max_reactions is not None and len(self._reactions) >= self.max_reactions:
            raise CapacityExceeded(
                f"reaction capacity exceeded: cannot add {reactant} -> {reaction_type} -> {product}, "
                f"max={self.max_reactions}"
            )
        rxn = Reaction(reactant, reaction_type, product)
        self._reactions.append(rxn)
        return rxn

    def extend(self, reactions: Iterable[Union[Reaction, Tuple[str, str, str]]]) -> None:
        for item in reactions:
            if isinstance(item, Reaction):
                self.append(item.reactant, item.reaction_type, item.product)
            else:
                reactant, reaction_type, product = item
                self.append(reactant, reaction_type, product)

    def find_label(self, reactant_index: int, product_index: int, registry: "CompoundRegistry") -> Optional[str]:
        reactant = registry.name(reactant_index)
        product = registry.name(product_index)
        for rxn in self._reactions:
            if rxn.reactant == reactant and rxn.product == product:
                return rxn.reaction_type
        return None

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def reactions(self) -> Tuple[Reaction, ...]:
        return tuple(self._reactions)

    def __len__(self) -> int:
        return len(self._reactions)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self._reactions)

    @classmethod
    def from_triples(cls, triples: Iterable[Union[Reaction, Tuple[str, str, str]]], max_reactions: Optional[int] = None) -> "ReactionCatalog":
        cat = cls(max_reactions=max_reactions)
        cat.extend(triples)
        return cat
