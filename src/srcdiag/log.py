"""Logging setup for the srcdiag command-line tool."""

from __future__ import annotations

import logging

__all__ = ["setup_logging"]

_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """Send records from every logger to stderr at ``level``."""

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logging.captureWarnings(True)
