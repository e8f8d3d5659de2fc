from __future__ import annotations
from dataclasses import dataclass
from .fitness import score as _score


@dataclass
class Individual:
    """One candidate: a stable ``id`` and an unbounded scalar ``position``.

    The score is never cached; it follows ``position`` on every read.
    """
    id: int
    position: float

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Individual.id is immutable")
        object.__setattr__(self, name, value)

    @property
    def score(self) -> float:
        return _score(self.position)

    def snapshot(self) -> "Snapshot":
        return Snapshot(self.id, self.position)

    def __str__(self) -> str:
        return f"({self.id}, x={self.position:g}, score={self.score:g})"


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of an :class:`Individual`."""
    id: int
    position: float

    @property
    def score(self) -> float:
        return _score(self.position)

    def __str__(self) -> str:
        return f"({self.id}, x={self.position:g}, score={self.score:g})"
