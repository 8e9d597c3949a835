from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List
import json

UNKNOWN_LABEL = "Unknown"


@dataclass(frozen=True)
class PathStep:
    "One reaction hop of a conversion path. resolved is False when the label is the Unknown marker."
    reactant: str
    reaction_type: str
    product: str
    resolved: bool = True

    def to_line(self) -> str:
        return f"{self.reactant} -> {self.reaction_type} -> {self.product}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Reactant": self.reactant,
            "Reaction": self.reaction_type,
            "Product": self.product,
            "Resolved": self.resolved,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PathStep":
        return cls(
            reactant=str(d["Reactant"]),
            reaction_type=str(d["Reaction"]),
            product=str(d["Product"]),
            resolved=bool(d.get("Resolved", True)),
        )


@dataclass
class ConversionPath:
    "Ordered compounds from start to end, with one labelled step per consecutive pair."
    indices: List[int]
    compounds: List[str]
    steps: List[PathStep] = field(default_factory=list)

    def __post_init__(self):
        if not self.compounds:
            raise ValueError("a conversion path holds at least one compound")
        if len(self.indices) != len(self.compounds):
            raise ValueError(f"indices/compounds length mismatch: {len(self.indices)} != {len(self.compounds)}")
        if len(self.steps) != len(self.compounds) - 1:
            raise ValueError(f"expected {len(self.compounds) - 1} steps, got {len(self.steps)}")
        # Connectivity invariant: each step joins consecutive compounds
        for i, step in enumerate(self.steps):
            if step.reactant != self.compounds[i] or step.product != self.compounds[i + 1]:
                raise ValueError(
                    f"Connectivity mismatch at step {i}: {step.reactant}->{step.product} "
                    f"!= {self.compounds[i]}->{self.compounds[i + 1]}"
                )

    @property
    def start(self) -> str:
        return self.compounds[0]

    @property
    def end(self) -> str:
        return self.compounds[-1]

    @property
    def num_steps(self) -> int:
        return len(self.steps)

    @property
    def labels(self) -> List[str]:
        return [s.reaction_type for s in self.steps]

    def __len__(self) -> int:
        return len(self.compounds)

    def to_text(self) -> str:
        return "".join(s.to_line() + "\n" for s in self.steps)

    def to_list_of_dicts(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self.steps]

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(
            {"compounds": list(self.compounds), "steps": self.to_list_of_dicts()},
            indent=indent,
        )

    @classmethod
    def single(cls, index: int, name: str) -> "ConversionPath":
        return cls(indices=[index], compounds=[name], steps=[])

    @classmethod
    def from_list_of_dicts(cls, items: Iterable[Dict[str, Any]], indices: List[int]) -> "ConversionPath":
        steps = [PathStep.from_dict(d) for d in items]
        if not steps:
            raise ValueError("cannot infer compounds from an empty step list")
        compounds = [steps[0].reactant] + [s.product for s in steps]
        return cls(indices=list(indices), compounds=compounds, steps=steps)
