"""
Logging setup for the CLI.

Library modules only call `logging.getLogger(__name__)`; handlers are
installed here, by the entry point. The shell talks to the user on stdout,
so log records go to stderr through a single stream handler.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Install one stderr handler on the root logger at `level`."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
