from __future__ import annotations
from typing import Dict, Iterator, List, Optional

from .errors import CapacityExceeded


class CompoundRegistry:
    "Dense, zero-based integer identities for compound names, in order of first appearance."
    def __init__(self, max_compounds: Optional[int] = None):
        if max_compounds is not None and max_compounds < 0:
            raise ValueError(f"max_compounds must be >= 0, got {max_compounds}")
        self.max_compounds = max_compounds
        self._index: Dict[str, int] = {}
        self._names: List[str] = []
        self._frozen = False

    def register(self, name: str) -> int:
        idx = self._index.get(name)
        if idx is not None:
            return idx
        if self._frozen:
            raise RuntimeError(f"compound registry is frozen: cannot register {name!r}")
        if self.max_compounds is not None and len(self._names) >= self.max_compounds:
            raise CapacityExceeded(
                f"compound capacity exceeded: cannot register {name!r}, max={self.max_compounds}"
            )
        idx = len(self._names)
        self._names.append(name)
        self._index[name] = idx
        return idx

    def lookup(self, name: str) -> Optional[int]:
        # exact, case-sensitive; callers trim
        return self._index.get(name)

    def name(self, index: int) -> str:
        if index < 0 or index >= len(self._names):
            raise IndexError(f"compound index {index} out of range (registered: {len(self._names)})")
        return self._names[index]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return list(self._names)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)
