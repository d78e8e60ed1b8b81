# src/othello/log.py

from __future__ import annotations

import logging

from othello.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure the root logger once for CLI entry points.
    Library modules only ever call logging.getLogger(__name__).
    """
    lvl = level if level is not None else LOG_LEVEL
    if isinstance(lvl, str):
        lvl = lvl.upper()
    logging.basicConfig(level=lvl, format=LOG_FORMAT, force=True)
