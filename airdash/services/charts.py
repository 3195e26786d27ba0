"""Plotly figures for the dashboard."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import plotly.graph_objects as go

from ..data.waqi import TrendPoint
from .advice import GAUGE_MAX, SEVERITY_BANDS, band_for, normalize_index

BAND_FLOORS = (0,) + tuple(band.upper for band in SEVERITY_BANDS[:-1])


def build_gauge(index: Optional[float], title: str = "AQI") -> go.Figure:
    value = normalize_index(index)
    band = band_for(value)
    steps = []
    for floor, band_def in zip(BAND_FLOORS, SEVERITY_BANDS):
        upper = GAUGE_MAX if math.isinf(band_def.upper) else band_def.upper
        steps.append({"range": [floor, upper], "color": band_def.color})

    figure = go.Figure(
        go.Indicator(
            mode="gauge+number" if value is not None else "gauge",
            value=max(0.0, min(GAUGE_MAX, value)) if value is not None else 0,
            title={"text": band.name if band else title},
            gauge={
                "axis": {"range": [0, GAUGE_MAX]},
                "bar": {"color": "#ffffff", "thickness": 0.2},
                "steps": steps,
            },
        )
    )
    figure.update_layout(height=260, margin=dict(l=20, r=20, t=50, b=10))
    return figure


def build_trend_chart(points: Sequence[TrendPoint], title: str = "24-Hour Trend") -> go.Figure:
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=[point.label for point in points],
            y=[point.value for point in points],
            mode="lines+markers",
            name="PM2.5",
        )
    )
    figure.update_layout(title=title, xaxis_title="Time", yaxis_title="Value", height=300)
    return figure
