from __future__ import annotations
import argparse
import sys
from typing import Optional, Sequence

from .algorithms.base import AlgoConfig
from .algorithms.merge import MergeToBest
from .core.config import ConfigError, load_config
from .core.logger import get_logger, set_level
from .core.stats import format_report

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="evomerge",
                                 description="Run the merge-to-best optimizer and print a summary.")
    ap.add_argument("--config", default=None, help="YAML file overriding the built-in defaults")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_level(args.log_level)
    try:
        cfg = load_config(args.config) if args.config else AlgoConfig()
    except (ConfigError, OSError) as e:
        log.error("bad configuration: %s", e)
        return 2
    out = MergeToBest(cfg).run()
    print(format_report(cfg.N, cfg.T_iter, cfg.seed, out["stats"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
