"""Tests for icon classification."""

from __future__ import annotations

import pytest

from daily_weather.datasources.forecast import classify
from daily_weather.datasources.forecast.conditions import (
    HEAVY_SHOWERS_MAX,
    LIGHT_MAX,
    LIGHT_SHOWERS_MAX,
)
from daily_weather.schemas import IconCategory


class TestFixedIcons:
    """Icons that ignore precipitation intensity."""

    @pytest.mark.parametrize(
        ("icon", "expected"),
        [
            ("clear-day", IconCategory.SUNNY),
            ("clear-night", IconCategory.SUNNY),
            ("wind", IconCategory.BLANK_ICON),
            ("fog", IconCategory.FOG),
            ("cloudy", IconCategory.HEAVY_CLOUD),
            ("partly-cloudy-day", IconCategory.SUNNY_INTERVALS),
            ("partly-cloudy-night", IconCategory.SUNNY_INTERVALS),
            ("thunderstorm", IconCategory.THUNDER),
        ],
    )
    def test_mapping(self, icon: str, expected: IconCategory) -> None:
        assert classify(icon, 0.0) == expected
        assert classify(icon, 0.5) == expected

    def test_clear_day_is_sunny(self) -> None:
        assert classify("clear-day", 0.5) == "sunny"


class TestRain:
    """Rain splits into four tiers by intensity."""

    @pytest.mark.parametrize(
        ("intensity", "expected"),
        [
            (0.0, IconCategory.LIGHT_SHOWERS),
            (0.001, IconCategory.LIGHT_SHOWERS),
            (0.01, IconCategory.LIGHT_RAIN),
            (0.05, IconCategory.HEAVY_SHOWERS),
            (0.2, IconCategory.HEAVY_RAIN),
        ],
    )
    def test_tiers(self, intensity: float, expected: IconCategory) -> None:
        assert classify("rain", intensity) == expected

    @pytest.mark.parametrize(
        ("boundary", "expected"),
        [
            (0.002, IconCategory.LIGHT_SHOWERS),
            (0.017, IconCategory.LIGHT_RAIN),
            (0.1, IconCategory.HEAVY_SHOWERS),
        ],
    )
    def test_boundaries_route_to_lighter_tier(
        self, boundary: float, expected: IconCategory
    ) -> None:
        assert classify("rain", boundary) == expected

    def test_just_above_boundaries(self) -> None:
        assert classify("rain", 0.0021) == IconCategory.LIGHT_RAIN
        assert classify("rain", 0.0171) == IconCategory.HEAVY_SHOWERS
        assert classify("rain", 0.1001) == IconCategory.HEAVY_RAIN

    def test_severity_never_increases_as_intensity_drops(self) -> None:
        order = [
            IconCategory.LIGHT_SHOWERS,
            IconCategory.LIGHT_RAIN,
            IconCategory.HEAVY_SHOWERS,
            IconCategory.HEAVY_RAIN,
        ]
        intensities = [0.5, 0.1001, 0.1, 0.05, 0.0171, 0.017, 0.01, 0.0021, 0.002, 0.0]
        severities = [order.index(classify("rain", x)) for x in intensities]
        assert severities == sorted(severities, reverse=True)

    def test_thresholds(self) -> None:
        assert (LIGHT_SHOWERS_MAX, LIGHT_MAX, HEAVY_SHOWERS_MAX) == (0.002, 0.017, 0.1)


class TestSnow:
    """Snow uses the same thresholds as rain."""

    @pytest.mark.parametrize(
        ("intensity", "expected"),
        [
            (0.002, IconCategory.LIGHT_SNOW_SHOWERS),
            (0.017, IconCategory.LIGHT_SNOW),
            (0.05, IconCategory.HEAVY_SNOW_SHOWERS),
            (0.1, IconCategory.HEAVY_SNOW_SHOWERS),
            (0.11, IconCategory.HEAVY_SNOW),
        ],
    )
    def test_tiers(self, intensity: float, expected: IconCategory) -> None:
        assert classify("snow", intensity) == expected


class TestSleet:
    """Sleet has two tiers."""

    def test_showers_up_to_boundary(self) -> None:
        assert classify("sleet", 0.0) == IconCategory.SLEET_SHOWERS
        assert classify("sleet", 0.1) == IconCategory.SLEET_SHOWERS

    def test_steady_above_boundary(self) -> None:
        assert classify("sleet", 0.11) == IconCategory.SLEET


class TestHeaviestTier:
    """Intensities far above the last bound land in the heaviest category."""

    @pytest.mark.parametrize(
        ("icon", "expected"),
        [
            ("rain", IconCategory.HEAVY_RAIN),
            ("snow", IconCategory.HEAVY_SNOW),
            ("sleet", IconCategory.SLEET),
        ],
    )
    def test_open_ended(self, icon: str, expected: IconCategory) -> None:
        assert classify(icon, 5.0) == expected


class TestUnknown:
    """Anything outside the table falls back to the blank icon."""

    @pytest.mark.parametrize("icon", ["unknown-code", "", "hail", "tornado", "RAIN", "Clear-Day"])
    def test_blank_icon(self, icon: str) -> None:
        assert classify(icon, 0.0) == IconCategory.BLANK_ICON

    def test_none_icon(self) -> None:
        assert classify(None, 0.3) == IconCategory.BLANK_ICON

    def test_missing_intensity_counts_as_zero(self) -> None:
        assert classify("rain", None) == IconCategory.LIGHT_SHOWERS
        assert classify("snow") == IconCategory.LIGHT_SNOW_SHOWERS
