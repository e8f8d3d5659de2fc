"""
config.py

YAML run configuration. Keys mirror ``configs/main.yaml``::

    population_size: 10
    T_iter: 15000
    seed: 123
    bounds: {min: 0.0, max: 1000.0}
    mutation: {min: 0.05, max: 0.10}
    mutate_best: false

Every key is optional; missing keys fall back to the :class:`AlgoConfig` defaults.
"""
from __future__ import annotations
import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..algorithms.base import AlgoConfig

_KEYS = {"population_size", "T_iter", "seed", "bounds", "mutation", "mutate_best"}


class ConfigError(ValueError):
    pass


def _pair(cfg: Mapping[str, Any], key: str):
    p = cfg.get(key)
    if p is None:
        return None, None
    if not isinstance(p, Mapping) or set(p) - {"min", "max"}:
        raise ConfigError(f"'{key}' must be a mapping with 'min' and/or 'max'")
    return p.get("min"), p.get("max")


def from_mapping(cfg: Optional[Mapping[str, Any]]) -> AlgoConfig:
    cfg = cfg or {}
    if not isinstance(cfg, Mapping):
        raise ConfigError("configuration root must be a mapping")
    unknown = set(cfg) - _KEYS
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(sorted(map(str, unknown)))}")

    kw: Dict[str, Any] = {}
    try:
        if "population_size" in cfg: kw["N"] = int(cfg["population_size"])
        if "T_iter" in cfg: kw["T_iter"] = int(cfg["T_iter"])
        if "seed" in cfg: kw["seed"] = int(cfg["seed"])
        if "mutate_best" in cfg:
            if not isinstance(cfg["mutate_best"], bool):
                raise ConfigError(f"'mutate_best' must be true or false, got {cfg['mutate_best']!r}")
            kw["mutate_best"] = cfg["mutate_best"]
        lo, hi = _pair(cfg, "bounds")
        if lo is not None: kw["min_x"] = float(lo)
        if hi is not None: kw["max_x"] = float(hi)
        lo, hi = _pair(cfg, "mutation")
        if lo is not None: kw["min_mutation"] = float(lo)
        if hi is not None: kw["max_mutation"] = float(hi)
        return AlgoConfig(**kw)
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(str(e)) from e


def load_config(path: Union[str, Path]) -> AlgoConfig:
    try:
        cfg = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e
    return from_mapping(cfg)
