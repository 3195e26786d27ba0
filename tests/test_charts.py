"""Tests for the plotly figure builders."""

from airdash.data.waqi import TrendPoint
from airdash.services.advice import SEVERITY_BANDS
from airdash.services.charts import build_gauge, build_trend_chart


class TestBuildGauge:
    def test_reading(self):
        figure = build_gauge(120)
        indicator = figure.data[0]
        assert indicator.value == 120
        assert indicator.title.text == "Unhealthy for Sensitive Groups"
        assert len(indicator.gauge.steps) == len(SEVERITY_BANDS)
        assert tuple(indicator.gauge.steps[-1].range) == (300, 500)

    def test_value_is_clamped(self):
        assert build_gauge(900).data[0].value == 500

    def test_no_reading(self):
        indicator = build_gauge(None).data[0]
        assert indicator.mode == "gauge"
        assert indicator.title.text == "AQI"


class TestBuildTrendChart:
    def test_points(self):
        points = [TrendPoint("10:00", 12.0), TrendPoint("11:00", 15.0)]
        trace = build_trend_chart(points).data[0]
        assert list(trace.x) == ["10:00", "11:00"]
        assert list(trace.y) == [12.0, 15.0]
