"""View-model for the single-station dashboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import pandas as pd

from ..data.waqi import ForecastDay, Pollutants, StationReport, WaqiError
from ..utils.dates import format_day_label
from .advice import HealthAdvice, classify, gauge_angle, tier_color
from .exposure import cigarette_equivalent

LOGGER = logging.getLogger(__name__)

MISSING = "N/A"
POLLUTANT_LABELS = (
    ("pm25", "PM2.5"),
    ("pm10", "PM10"),
    ("no2", "NO₂"),
    ("so2", "SO₂"),
    ("co", "CO (ppm)"),
    ("o3", "O₃"),
)


class StationSource(Protocol):
    def station(self, query: str) -> StationReport:
        ...


@dataclass
class DashboardState:
    query: str = ""
    loading: bool = False
    error: Optional[str] = None
    report: Optional[StationReport] = None

    def begin_fetch(self, query: str) -> None:
        self.query = query
        self.loading = True
        self.error = None
        self.report = None

    def finish(self, report: StationReport) -> None:
        self.report = report
        self.loading = False

    def fail(self, message: str) -> None:
        self.error = message
        self.loading = False

    def reset(self) -> None:
        self.query = ""
        self.loading = False
        self.error = None
        self.report = None

    @property
    def index(self) -> Optional[float]:
        return self.report.index if self.report else None

    @property
    def location_name(self) -> str:
        return self.report.location_name if self.report else ""

    @property
    def advice(self) -> HealthAdvice:
        return classify(self.index)

    @property
    def cigarettes(self) -> int:
        return cigarette_equivalent(self.index)

    @property
    def gauge_angle(self) -> float:
        return gauge_angle(self.index)

    @property
    def color(self) -> str:
        return tier_color(self.index)


def refresh(
    state: DashboardState,
    source: StationSource,
    query: str,
    silent: bool = False,
) -> DashboardState:
    """Fetch ``query`` into ``state``; provider failures end up in ``state.error``.

    With ``silent`` a failure is only logged and the state is cleared, which is
    what the automatic lookup on page load wants.
    """
    query = query.strip()
    if not query:
        return state
    state.begin_fetch(query)
    try:
        report = source.station(query)
    except WaqiError as exc:
        LOGGER.warning("Lookup for %r failed: %s", query, exc)
        if silent:
            state.reset()
        else:
            state.fail(str(exc) or "Unknown error")
    else:
        state.finish(report)
    return state


def _display(value: Optional[float]) -> str:
    return MISSING if value is None else f"{value:g}"


def pollutant_table(pollutants: Pollutants) -> pd.DataFrame:
    readings = pollutants.as_dict()
    rows = [{"Pollutant": label, "Value": _display(readings[key])} for key, label in POLLUTANT_LABELS]
    return pd.DataFrame(rows, columns=["Pollutant", "Value"])


def forecast_table(days: Sequence[ForecastDay]) -> pd.DataFrame:
    rows = [
        {
            "Day": format_day_label(day.day),
            "PM2.5": _display(day.pm25),
            "PM10": _display(day.pm10),
            "O₃": _display(day.o3),
        }
        for day in days
    ]
    return pd.DataFrame(rows, columns=["Day", "PM2.5", "PM10", "O₃"])
