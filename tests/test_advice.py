"""
Tests for the index classifier.

Tests cover:
- Equivalence classes: one index inside each severity tier
- Boundary value analysis: every band upper bound and the value just above
- Error scenarios: missing, placeholder and non-numeric readings
- Gauge angle and tier colour helpers
"""

import math

import pytest

from airdash.services.advice import (
    NEUTRAL_COLOR,
    SEVERITY_BANDS,
    HealthAdvice,
    classify,
    gauge_angle,
    normalize_index,
    tier_color,
)


class TestClassify:
    """Test suite for classify()."""

    # ==================== Equivalence Classes ====================

    @pytest.mark.parametrize(
        "index, level, mask",
        [
            (0, "Good", False),
            (25, "Good", False),
            (75, "Moderate", False),
            (120, "Unhealthy for Sensitive Groups", True),
            (175, "Unhealthy", True),
            (250, "Very Unhealthy", True),
            (420, "Hazardous", True),
        ],
    )
    def test_tiers(self, index, level, mask):
        advice = classify(index)
        assert advice.level == level
        assert advice.mask is mask
        assert advice.action

    def test_good_range_never_recommends_mask(self):
        for index in range(0, 51):
            advice = classify(index)
            assert advice.level == "Good"
            assert advice.mask is False

    def test_unhealthy_range(self):
        for index in range(151, 201):
            advice = classify(index)
            assert advice.level == "Unhealthy"
            assert advice.mask is True

    # ==================== Boundary Value Analysis ====================

    @pytest.mark.parametrize(
        "upper, below, above",
        [
            (50, "Good", "Moderate"),
            (100, "Moderate", "Unhealthy for Sensitive Groups"),
            (150, "Unhealthy for Sensitive Groups", "Unhealthy"),
            (200, "Unhealthy", "Very Unhealthy"),
            (300, "Very Unhealthy", "Hazardous"),
        ],
    )
    def test_bound_belongs_to_lower_band(self, upper, below, above):
        assert classify(upper).level == below
        assert classify(upper + 1).level == above

    def test_fractional_value_just_above_bound(self):
        assert classify(50.5).level == "Moderate"

    # ==================== Edge Cases ====================

    def test_negative_index_is_good(self):
        assert classify(-10).level == "Good"

    def test_huge_index_is_hazardous(self):
        assert classify(10_000).level == "Hazardous"
        assert classify(float("inf")).level == "Hazardous"

    def test_numeric_string(self):
        assert classify("175").level == "Unhealthy"

    @pytest.mark.parametrize("value", [None, "-", "", "abc", float("nan"), True, [], {}])
    def test_no_reading_is_neutral(self, value):
        advice = classify(value)
        assert advice == HealthAdvice.neutral()
        assert advice.level is None
        assert advice.action == ""
        assert advice.mask is False
        assert advice.has_reading is False


class TestSeverityBands:
    """Invariants of the band table."""

    def test_bands_ascending_and_exhaustive(self):
        uppers = [band.upper for band in SEVERITY_BANDS]
        assert uppers == sorted(uppers)
        assert uppers == [50, 100, 150, 200, 300, math.inf]

    def test_mask_false_only_for_good_and_moderate(self):
        no_mask = {band.name for band in SEVERITY_BANDS if not band.mask}
        assert no_mask == {"Good", "Moderate"}


class TestNormalizeIndex:
    """Test suite for normalize_index()."""

    def test_numbers_pass_through(self):
        assert normalize_index(42) == 42.0
        assert normalize_index(42.5) == 42.5

    def test_strings_are_parsed(self):
        assert normalize_index(" 87 ") == 87.0

    def test_inf_string_is_missing(self):
        assert normalize_index("inf") is None

    def test_placeholder_is_missing(self):
        assert normalize_index("-") is None


class TestGaugeAndColor:
    """Gauge rotation and badge colour helpers."""

    def test_gauge_angle_scales_to_half_circle(self):
        assert gauge_angle(0) == 0
        assert gauge_angle(250) == 90
        assert gauge_angle(500) == 180

    def test_gauge_angle_clamps(self):
        assert gauge_angle(-20) == 0
        assert gauge_angle(900) == 180
        assert gauge_angle(None) == 0

    def test_tier_color(self):
        assert tier_color(10) == SEVERITY_BANDS[0].color
        assert tier_color(350) == SEVERITY_BANDS[-1].color
        assert tier_color(None) == NEUTRAL_COLOR
