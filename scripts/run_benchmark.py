#!/usr/bin/env python
import argparse
from evomerge.algorithms.base import AlgoConfig
from evomerge.benchmark import summarise, sweep
from evomerge.core.config import load_config

def main(cfg_path, first: int, runs: int):
    base = load_config(cfg_path) if cfg_path else AlgoConfig()
    df = sweep(base, range(first, first + runs))
    print(f"Seed sweep (N={base.N}, T_iter={base.T_iter}):")
    print(df.to_string())
    print()
    print(summarise(df).to_string())

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="configs/main.yaml")
    ap.add_argument("--first-seed", type=int, default=1)
    ap.add_argument("--runs", type=int, default=20)
    a = ap.parse_args()
    main(a.config, a.first_seed, a.runs)
