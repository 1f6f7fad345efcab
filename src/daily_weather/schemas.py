"""
Domain models for daily weather.

Pydantic models for the forecast record handed to the consuming application.
The fetcher normalizes provider responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from daily_weather.errors import InputError

# =============================================================================
# Units
# =============================================================================


class Scale(StrEnum):
    """Temperature scale requested by the caller."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @classmethod
    def parse(cls, value: str | Scale | None) -> Scale:
        """
        Map free text onto a scale.

        ``"fahrenheit"`` and the legacy spelling ``"farenheit"`` both mean
        Fahrenheit. Anything else falls back to Celsius.
        """
        if isinstance(value, Scale):
            return value
        normalized = (value or "").strip().lower()
        if normalized in _FAHRENHEIT_SPELLINGS:
            return cls.FAHRENHEIT
        return cls.CELSIUS

    @property
    def units_param(self) -> str:
        """Provider unit system: ``us`` (°F, mph) or ``uk`` (°C, mph)."""
        return "us" if self is Scale.FAHRENHEIT else "uk"

    @property
    def units_label(self) -> Literal["C", "F"]:
        return "F" if self is Scale.FAHRENHEIT else "C"


_FAHRENHEIT_SPELLINGS = frozenset({"fahrenheit", "farenheit"})


# =============================================================================
# Icons
# =============================================================================


class IconCategory(StrEnum):
    """Display icons known to the consuming application."""

    SUNNY = "sunny"
    LIGHT_SHOWERS = "light_showers"
    LIGHT_RAIN = "light_rain"
    HEAVY_SHOWERS = "heavy_showers"
    HEAVY_RAIN = "heavy_rain"
    LIGHT_SNOW_SHOWERS = "light_snow_showers"
    LIGHT_SNOW = "light_snow"
    HEAVY_SNOW_SHOWERS = "heavy_snow_showers"
    HEAVY_SNOW = "heavy_snow"
    SLEET_SHOWERS = "sleet_showers"
    SLEET = "sleet"
    BLANK_ICON = "blank_icon"
    FOG = "fog"
    HEAVY_CLOUD = "heavy_cloud"
    SUNNY_INTERVALS = "sunny_intervals"
    THUNDER = "thunder"


# =============================================================================
# Geographic
# =============================================================================


class Coordinates(BaseModel):
    """Geographic point parsed from a ``"lat,lon"`` string."""

    model_config = {"frozen": True}

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    @classmethod
    def parse(cls, location: str) -> Coordinates:
        """
        Parse ``"51.5229965,-0.0871299"`` into coordinates.

        Raises:
            InputError: Not exactly two numeric, in-range components.
        """
        parts = str(location).split(",")
        if len(parts) != 2:
            raise InputError(f"Expected 'lat,lon', got {location!r}")
        try:
            return cls(lat=float(parts[0]), lon=float(parts[1]))
        except (ValueError, ValidationError) as exc:
            raise InputError(f"Invalid coordinates {location!r}") from exc

    def __str__(self) -> str:
        return f"{self.lat},{self.lon}"


# =============================================================================
# Forecast
# =============================================================================


class ForecastRequest(BaseModel):
    """Arguments of a single forecast lookup."""

    location: str = Field(..., description="Coordinates as 'lat,lon'")
    address: str = Field(default="", description="Human-readable address label")
    scale: Scale = Scale.CELSIUS
    is_test: bool = False

    @classmethod
    def build(
        cls, location: str, address: str, scale: str | Scale, is_test: bool = False
    ) -> ForecastRequest:
        return cls(location=location, address=address, scale=Scale.parse(scale), is_test=is_test)

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates.parse(self.location)


class ForecastResult(BaseModel):
    """One day's forecast, flattened for display."""

    model_config = {"frozen": True}

    location: str
    address: str
    weather_image: IconCategory
    weather_description: str
    min: float = Field(..., description="Minimum temperature in the requested scale")
    max: float = Field(..., description="Maximum temperature in the requested scale")
    precip_type: str | None = None
    precip_probability: float = Field(default=0.0, ge=0, le=1)
    units: Literal["C", "F"] = "C"

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict, keyed the way the consuming app expects."""
        return self.model_dump(mode="json")


#: Fixed record returned in test mode instead of calling the provider.
SAMPLE_FORECAST = ForecastResult(
    location="London",
    address="London",
    weather_image=IconCategory.SUNNY,
    weather_description="Sunny throughout the day.",
    min=20,
    max=24,
    precip_type=None,
    precip_probability=0.0,
    units="C",
)
