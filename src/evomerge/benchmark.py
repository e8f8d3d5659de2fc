"""Seed sweeps over MergeToBest and their summary statistics."""
from __future__ import annotations
import dataclasses
import numpy as np
import pandas as pd
from scipy import stats as sps
from typing import Iterable

from .algorithms.base import AlgoConfig
from .algorithms.merge import MergeToBest


def sweep(base: AlgoConfig, seeds: Iterable[int]) -> pd.DataFrame:
    rows = []
    for s in seeds:
        cfg = dataclasses.replace(base, seed=int(s))
        st = MergeToBest(cfg).run()["stats"]
        rows.append({"seed": int(s), "min": st.min, "max": st.max, "avg": st.mean,
                     "best_id": st.best.id, "best_x": st.best.position})
    return pd.DataFrame(rows).set_index("seed")


def summarise(df: pd.DataFrame, alpha: float = 0.05) -> pd.Series:
    """Describe the per-seed mean scores, with a t-based ``1 - alpha`` interval."""
    avg = df["avg"].to_numpy(dtype=float)
    if avg.size > 1:
        d = sps.describe(avg)
        mean, std = float(d.mean), float(np.sqrt(d.variance))
        lo, hi = sps.t.interval(1 - alpha, d.nobs - 1, loc=mean, scale=sps.sem(avg))
    else:
        mean, std = float(avg.mean()), 0.0
        lo = hi = mean
    return pd.Series({"runs": int(avg.size), "mean": mean, "std": std,
                      "median": float(np.median(avg)), "ci_lo": float(lo), "ci_hi": float(hi),
                      "worst_min": float(df["min"].min()), "best_max": float(df["max"].max())})
