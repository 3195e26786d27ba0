"""Illustrative "cigarettes per day" figure shown next to the index.

The steps are a fixed display label, not a dose model.
"""

from __future__ import annotations

from typing import Tuple

from .advice import normalize_index

CIGARETTE_STEPS: Tuple[Tuple[float, int], ...] = (
    (50, 0),
    (100, 2),
    (200, 5),
    (300, 8),
)
CIGARETTE_CEILING = 13


def cigarette_equivalent(index: object) -> int:
    value = normalize_index(index)
    if value is None or value < 0:
        return 0
    for upper, count in CIGARETTE_STEPS:
        if value <= upper:
            return count
    return CIGARETTE_CEILING
