"""
Logging setup for the game.

Modules obtain a logger via `logging.getLogger(__name__)`; the entry point
calls `setup_default_logging` once so those loggers have somewhere to go.
"""
from __future__ import annotations

import logging
from typing import Union


def setup_default_logging(level: Union[int, str] = "INFO") -> None:
    """Configure the root logger once; no-op if handlers already exist."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
