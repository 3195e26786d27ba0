"""Health advice derived from the aggregate air-quality index."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

NEUTRAL_COLOR = "#9e9e9e"
GAUGE_MAX = 500.0


@dataclass(frozen=True)
class SeverityBand:
    name: str
    upper: float
    action: str
    mask: bool
    color: str


@dataclass(frozen=True)
class HealthAdvice:
    level: Optional[str]
    action: str
    mask: bool

    @classmethod
    def neutral(cls) -> "HealthAdvice":
        """Placeholder shown while there is no reading."""
        return cls(level=None, action="", mask=False)

    @property
    def has_reading(self) -> bool:
        return self.level is not None


# Upper bounds are inclusive: an index equal to a bound stays in that band.
SEVERITY_BANDS: Tuple[SeverityBand, ...] = (
    SeverityBand(
        "Good",
        50,
        "Air quality is good - enjoy outdoor activities.",
        False,
        "#00e400",
    ),
    SeverityBand(
        "Moderate",
        100,
        "Some sensitive people should reduce strenuous outdoor activity.",
        False,
        "#ffff00",
    ),
    SeverityBand(
        "Unhealthy for Sensitive Groups",
        150,
        "People with respiratory conditions should limit outdoor exposure. "
        "Consider wearing an N95 for long time outdoors.",
        True,
        "#ff7e00",
    ),
    SeverityBand(
        "Unhealthy",
        200,
        "Avoid extended outdoor exertion. Use an N95/KN95 mask outdoors.",
        True,
        "#ff0000",
    ),
    SeverityBand(
        "Very Unhealthy",
        300,
        "Stay indoors and use air purifiers if possible. Masks strongly recommended outdoors.",
        True,
        "#8f3f97",
    ),
    SeverityBand(
        "Hazardous",
        float("inf"),
        "Remain indoors, avoid all outdoor activity. Seek medical advice if symptoms occur.",
        True,
        "#7e0023",
    ),
)


def normalize_index(value: object) -> Optional[float]:
    """Coerce a provider index value to a float, or None for "no reading".

    Numbers and numeric strings are accepted. Placeholders such as ``"-"``,
    booleans, NaN and "inf" strings are all treated as missing.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    if isinstance(value, str) and math.isinf(number):
        return None
    return number


def band_for(index: object) -> Optional[SeverityBand]:
    value = normalize_index(index)
    if value is None:
        return None
    for band in SEVERITY_BANDS:
        if value <= band.upper:
            return band
    return SEVERITY_BANDS[-1]


def classify(index: object) -> HealthAdvice:
    """Return the tier, advisory text and mask recommendation for ``index``."""
    band = band_for(index)
    if band is None:
        return HealthAdvice.neutral()
    return HealthAdvice(level=band.name, action=band.action, mask=band.mask)


def tier_color(index: object) -> str:
    band = band_for(index)
    return band.color if band else NEUTRAL_COLOR


def gauge_angle(index: object) -> float:
    """Map the index, clamped to [0, 500], onto a half-circle in degrees."""
    value = normalize_index(index) or 0.0
    capped = max(0.0, min(GAUGE_MAX, value))
    return capped / GAUGE_MAX * 180.0
