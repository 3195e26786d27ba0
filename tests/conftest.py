"""
Pytest configuration for the dashboard tests.

Provides sample WAQI feed bodies and in-memory storage shared across suites.
"""

import copy

import pytest

from airdash.utils.storage import MemoryStorage

SAMPLE_FEED = {
    "status": "ok",
    "data": {
        "aqi": 75,
        "idx": 1451,
        "city": {"geo": [39.95, 116.46], "name": "Beijing (北京)"},
        "iaqi": {
            "pm25": {"v": 75},
            "pm10": {"v": 40},
            "no2": {"v": 12.4},
            "co": {"v": 3.1},
            "o3": {"v": 21},
        },
        "time": {"s": "2024-03-01 14:00:00", "iso": "2024-03-01T14:00:00+08:00"},
        "forecast": {
            "daily": {
                "o3": [
                    {"avg": 10, "day": "2024-02-29", "max": 20, "min": 2},
                    {"avg": 12, "day": "2024-03-01", "max": 22, "min": 3},
                    {"avg": 15, "day": "2024-03-02", "max": 25, "min": 5},
                    {"avg": 18, "day": "2024-03-03", "max": 28, "min": 6},
                ],
                "pm10": [
                    {"avg": 30, "day": "2024-03-01", "max": 45, "min": 20},
                    {"avg": 35, "day": "2024-03-02", "max": 50, "min": 22},
                ],
                "pm25": [
                    {"avg": 80, "day": "2024-02-29", "max": 110, "min": 50},
                    {"avg": 70, "day": "2024-03-01", "max": 90, "min": 45},
                    {"avg": 65, "day": "2024-03-02", "max": 85, "min": 40},
                ],
                "uvi": [{"avg": 1, "day": "2024-03-01", "max": 2, "min": 0}],
            }
        },
    },
}


@pytest.fixture
def feed_payload():
    """A fresh copy of a typical WAQI feed body."""
    return copy.deepcopy(SAMPLE_FEED)


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value storage."""
    return MemoryStorage()
