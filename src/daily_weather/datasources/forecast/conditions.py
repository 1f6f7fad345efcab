"""
Map provider icon codes onto the app's display icons.

The provider only distinguishes rain/snow/sleet by type, so precipitation
intensity (inches per hour) picks between showers and steady precipitation.
Each threshold is an inclusive upper bound.
"""

from __future__ import annotations

from daily_weather.schemas import IconCategory

LIGHT_SHOWERS_MAX = 0.002
LIGHT_MAX = 0.017
HEAVY_SHOWERS_MAX = 0.1

# icon → icon, no intensity involved
_FIXED: dict[str, IconCategory] = {
    "clear-day": IconCategory.SUNNY,
    "clear-night": IconCategory.SUNNY,
    "wind": IconCategory.BLANK_ICON,  # no wind icon yet
    "fog": IconCategory.FOG,
    "cloudy": IconCategory.HEAVY_CLOUD,
    "partly-cloudy-day": IconCategory.SUNNY_INTERVALS,
    "partly-cloudy-night": IconCategory.SUNNY_INTERVALS,
    "thunderstorm": IconCategory.THUNDER,
}

# icon → ((upper bound, category) tiers lightest first, category above the last bound)
_TIERED: dict[str, tuple[list[tuple[float, IconCategory]], IconCategory]] = {
    "rain": (
        [
            (LIGHT_SHOWERS_MAX, IconCategory.LIGHT_SHOWERS),
            (LIGHT_MAX, IconCategory.LIGHT_RAIN),
            (HEAVY_SHOWERS_MAX, IconCategory.HEAVY_SHOWERS),
        ],
        IconCategory.HEAVY_RAIN,
    ),
    "snow": (
        [
            (LIGHT_SHOWERS_MAX, IconCategory.LIGHT_SNOW_SHOWERS),
            (LIGHT_MAX, IconCategory.LIGHT_SNOW),
            (HEAVY_SHOWERS_MAX, IconCategory.HEAVY_SNOW_SHOWERS),
        ],
        IconCategory.HEAVY_SNOW,
    ),
    "sleet": (
        [
            (HEAVY_SHOWERS_MAX, IconCategory.SLEET_SHOWERS),
        ],
        IconCategory.SLEET,
    ),
}


def classify(icon: str | None, precip_intensity: float | None = 0.0) -> IconCategory:
    """
    Translate a provider icon code and precipitation intensity into a display icon.

    Args:
        icon: Provider icon code, e.g. ``"rain"`` or ``"partly-cloudy-day"``.
        precip_intensity: Inches of liquid water per hour. ``None`` counts as 0.

    Returns:
        The matching ``IconCategory``; ``BLANK_ICON`` for unknown codes.

    Example:
        >>> classify("snow", 0.05)
        <IconCategory.HEAVY_SNOW_SHOWERS: 'heavy_snow_showers'>
    """
    if icon is None:
        return IconCategory.BLANK_ICON
    if icon in _FIXED:
        return _FIXED[icon]

    if icon not in _TIERED:
        return IconCategory.BLANK_ICON

    tiers, heaviest = _TIERED[icon]
    intensity = float(precip_intensity or 0.0)
    for upper, category in tiers:
        if intensity <= upper:
            return category
    return heaviest
