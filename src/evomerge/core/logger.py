"""Logging helpers. Records go to stderr so stdout only carries the report."""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "evomerge") -> logging.Logger:
    logger = logging.getLogger(name)
    root = logging.getLogger("evomerge")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        root.propagate = False
    return logger


def set_level(level) -> None:
    get_logger().setLevel(level.upper() if isinstance(level, str) else level)
