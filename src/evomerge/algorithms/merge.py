from __future__ import annotations
from typing import List

from .base import Algorithm
from ..core.individual import Individual
from ..core.rng import LCG
from ..operators.mutation import merge, mutate


class MergeToBest(Algorithm):
    """Rank, then pull everyone but the best halfway toward it with a noisy kick.

    Individuals further from the best in score receive a wider kick. The best
    itself is left alone unless ``cfg.mutate_best`` is set.
    """
    name = "MergeToBest"

    def initialize(self) -> List[Individual]:
        self.rng = LCG(self.cfg.seed)
        return [Individual(i, self.rng.next_range(self.cfg.min_x, self.cfg.max_x))
                for i in range(self.cfg.N)]

    def evolve(self, pop: List[Individual]) -> float:
        f, cfg = self.fitness_fn, self.cfg
        # tie order among equal scores is unspecified
        pop.sort(key=lambda ind: f(ind.position))
        bi = len(pop) - 1
        best_x = pop[bi].position
        best_f = f(best_x)
        for i in range(bi):
            ind = pop[i]
            ind.position = merge(ind.position, f(ind.position), best_x, best_f, self.rng,
                                 cfg.min_mutation, cfg.max_mutation)
        if cfg.mutate_best:
            pop[bi].position = mutate(best_x, self.rng, cfg.min_mutation, cfg.max_mutation)
        return best_f
