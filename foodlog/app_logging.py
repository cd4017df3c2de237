"""Logging configuration helpers."""

from __future__ import annotations

import logging


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure the ``foodlog`` logger with a single stderr stream handler."""
    logger = logging.getLogger("foodlog")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
