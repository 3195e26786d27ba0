"""Logging helpers."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """Configure root logging once; ``AIRDASH_LOG_LEVEL`` sets the default level."""
    if level is None:
        level = os.environ.get("AIRDASH_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT, level=level)
