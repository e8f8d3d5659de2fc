import math
import numpy as np
from typing import Iterable


def score(x: float) -> float:
    return (2*math.cos(0.039*x) + 5*math.sin(0.05*x) + 0.5*math.cos(0.01*x)
            + 10*math.sin(0.07*x) + 5*math.sin(0.1*x) + 5*math.sin(0.035*x))*10 + 500


def scores(xs: Iterable[float]) -> np.ndarray:
    # math.* per element keeps results bit-identical to score()
    return np.fromiter((score(float(x)) for x in xs), dtype=np.float64)


def sinusoid_fitness_factory():
    return score, 1
