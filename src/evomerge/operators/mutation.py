from ..core.rng import LCG


def mutate(x: float, rng: LCG, min_mut: float, max_mut: float, extra: float = 0.0) -> float:
    """Zero-centred uniform kick whose spread is ``max_mut - min_mut + extra``."""
    spread = max_mut - min_mut + extra
    return x + (rng.next_range(min_mut, min_mut + spread) - spread / 2)


def merge(x: float, fx: float, best_x: float, best_f: float, rng: LCG,
          min_mut: float, max_mut: float) -> float:
    """Average ``x`` with the best position, then mutate by ``|fx - best_f| / 100`` extra."""
    diff = abs(fx - best_f)
    return mutate((x + best_x) / 2, rng, min_mut, max_mut, diff / 100)
