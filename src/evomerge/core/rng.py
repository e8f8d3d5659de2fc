"""
rng.py

Linear-congruential generator (A=0x5DEECE66D, C=11, M=2**48). Every stochastic
decision in the optimizer goes through one instance of it, so a seed pins down
a whole run.
"""
from __future__ import annotations
import time
import numpy as np
from typing import Optional

A = 0x5DEECE66D
C = 11
M = 1 << 48
_MASK64 = (1 << 64) - 1

# Import time of the package, stands in for a build timestamp.
_BUILD_TIME = time.localtime()


def default_seed(now: Optional[time.struct_time] = None) -> int:
    """Seconds of day of ``now`` (the package import time when omitted)."""
    t = now or _BUILD_TIME
    return t.tm_hour * 60 * 60 + t.tm_min * 60 + t.tm_sec


class LCG:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = default_seed()
        self._state = int(seed) & _MASK64

    @property
    def state(self) -> int:
        return self._state

    def next_bits(self, bits: int) -> int:
        """Advance the state and return its top ``bits`` bits."""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= 48:
            raise ValueError(f"bits must be an int in [0, 48], got {bits!r}")
        self._state = (A * self._state + C) % M
        return self._state >> (48 - bits)

    def next_double(self) -> float:
        return self.next_bits(48) / M

    def next_range(self, lo, hi):
        """Uniform draw in [lo, hi), cast to the type of ``lo``.

        The caller guarantees ``lo <= hi``.
        """
        return type(lo)(self.next_double() * (hi - lo) + lo)

    def next_values(self, n: int, lo, hi) -> np.ndarray:
        dtype = np.int64 if isinstance(lo, (int, np.integer)) else np.float64
        out = np.empty(n, dtype=dtype)
        for i in range(n):
            out[i] = self.next_range(lo, hi)
        return out


def make_rng(seed: int) -> LCG:
    return LCG(seed)
