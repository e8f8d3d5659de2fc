"""
stats.py

Summary of a finished population and the plain-text run report.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .fitness import score
from .individual import Snapshot


@dataclass(frozen=True)
class RunStats:
    min: float
    max: float
    sum: float
    count: int
    best: Optional[Snapshot]
    best_score: Optional[float] = None

    @property
    def mean(self) -> float:
        return self.sum / self.count


def measure(population: Iterable, fitness_fn: Callable[[float], float] = score) -> RunStats:
    """Single pass over ``population``.

    On equal top scores the later individual wins, which is the one a stable
    ascending sort would leave at the end.
    """
    mn, mx, total, n, best = float("inf"), float("-inf"), 0.0, 0, None
    for ind in population:
        s = fitness_fn(ind.position)
        if s < mn:
            mn = s
        if s >= mx:
            mx, best = s, Snapshot(ind.id, ind.position)
        total += s
        n += 1
    if n == 0:
        raise ValueError("cannot measure an empty population")
    return RunStats(mn, mx, total, n, best, mx)


def format_report(N: int, T_iter: int, seed: int, stats: RunStats) -> str:
    b = stats.best
    lines = [
        f"Count: {N}, steps: {T_iter}",
        f"Seed: {seed}",
        "Results:",
        f"  min:  {stats.min:g}",
        f"  max:  {stats.max:g}",
        f"  avg:  {stats.mean:g}",
        f"  best: ({b.id}, x={b.position:g}, score={stats.best_score:g})",
    ]
    return "\n".join(lines)
