from __future__ import annotations
from dataclasses import dataclass


class CapacityExceeded(RuntimeError):
    """Raised when a registry or catalog would grow past its configured bound."""


class InternalInvariantViolation(AssertionError):
    """Raised when a predecessor chain cannot be walked back to its origin."""


@dataclass(frozen=True)
class PathError:
    "Base for search outcomes that carry no path."

    @property
    def message(self) -> str:
        return "no conversion path"


@dataclass(frozen=True)
class CompoundNotFound(PathError):
    "A requested compound name is absent from the registry. role is 'start' or 'end'."
    role: str
    name: str

    @property
    def message(self) -> str:
        return f"{self.role} compound not found: {self.name}"


@dataclass(frozen=True)
class PathNotFound(PathError):
    "Both compounds are known but no directed route connects them."
    start: str
    end: str

    @property
    def message(self) -> str:
        return f"no conversion path from {self.start} to {self.end}"
