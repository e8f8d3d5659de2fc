from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import numpy as np
from typing import Callable, Any, Dict, List, Optional, Tuple

from ..core.fitness import score
from ..core.individual import Individual, Snapshot
from ..core.logger import get_logger
from ..core.rng import LCG
from ..core.stats import measure

log = get_logger(__name__)


@dataclass
class AlgoConfig:
    N: int = 10
    T_iter: int = 15000
    seed: int = 123
    min_x: float = 0.0
    max_x: float = 1000.0
    min_mutation: float = 0.05
    max_mutation: float = 0.10
    mutate_best: bool = False

    def __post_init__(self):
        # positions are reals; an int lower bound would make next_range truncate
        self.min_x, self.max_x = float(self.min_x), float(self.max_x)
        self.min_mutation, self.max_mutation = float(self.min_mutation), float(self.max_mutation)
        if self.N < 1:
            raise ValueError(f"population size must be >= 1, got {self.N}")
        if self.T_iter < 0:
            raise ValueError(f"step count must be >= 0, got {self.T_iter}")
        if self.min_x > self.max_x:
            raise ValueError(f"min_x ({self.min_x}) > max_x ({self.max_x})")
        if self.min_mutation > self.max_mutation:
            raise ValueError(f"min_mutation ({self.min_mutation}) > max_mutation ({self.max_mutation})")


class Phase(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    COMPLETED = "completed"


class Algorithm:
    name: str = "BASE"
    def __init__(self, cfg: AlgoConfig, fitness_fn: Callable[[float], float] = score):
        self.cfg, self.fitness_fn = cfg, fitness_fn
        self.rng: Optional[LCG] = None
        self.phase = Phase.UNINITIALIZED
        self._pop: List[Individual] = []
    def initialize(self) -> List[Individual]:
        raise NotImplementedError
    def evolve(self, pop: List[Individual]) -> float:
        """Run one step in place on ``pop``; return the best score it ranked."""
        raise NotImplementedError
    @property
    def population(self) -> Tuple[Snapshot, ...]:
        if self.phase is not Phase.COMPLETED:
            raise RuntimeError(f"population is only available once completed (phase: {self.phase.value})")
        return tuple(ind.snapshot() for ind in self._pop)
    def run(self) -> Dict[str, Any]:
        if self.phase is not Phase.UNINITIALIZED:
            raise RuntimeError(f"{self.name} has already been run (phase: {self.phase.value})")
        self._pop = self.initialize()
        self.phase = Phase.RUNNING
        log.info("%s: N=%d, T_iter=%d, seed=%d", self.name, self.cfg.N, self.cfg.T_iter, self.cfg.seed)
        every = max(1, self.cfg.T_iter // 10)
        history = np.empty(self.cfg.T_iter)
        for t in range(self.cfg.T_iter):
            history[t] = self.evolve(self._pop)
            if (t + 1) % every == 0:
                log.debug("step %d/%d best=%.6g", t + 1, self.cfg.T_iter, history[t])
        self.phase = Phase.COMPLETED
        stats = measure(self._pop, self.fitness_fn)
        log.info("%s: done, min=%g max=%g avg=%g", self.name, stats.min, stats.max, stats.mean)
        return {"population": self.population, "best": stats.best, "stats": stats, "history": history}
