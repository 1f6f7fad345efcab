"""Today's forecast from the forecast provider, normalized to ``ForecastResult``."""

from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from daily_weather.config import get_settings, resolve_api_key
from daily_weather.datasources.forecast import client
from daily_weather.datasources.forecast.conditions import classify
from daily_weather.errors import NetworkError, PermanentError
from daily_weather.schemas import (
    SAMPLE_FORECAST,
    Coordinates,
    ForecastRequest,
    ForecastResult,
    Scale,
)
from daily_weather.services.http import session


def build_forecast_params(scale: str | Scale) -> dict[str, str]:
    """Query parameters: unit system for ``scale`` plus the excluded blocks."""
    return {
        "units": Scale.parse(scale).units_param,
        "exclude": ",".join(client.EXCLUDE_BLOCKS),
    }


def forecast_url(coords: Coordinates, api_key: str, base_url: str = client.FORECAST_API) -> str:
    """``{base_url}/{api_key}/{lat},{lon}``. The key travels in the path."""
    return f"{base_url.rstrip('/')}/{api_key}/{coords}"


def fetch_forecast(
    location: str,
    address: str,
    scale: str | Scale,
    is_test: bool = False,
    *,
    http: requests.Session | None = None,
    api_key: str | None = None,
) -> ForecastResult:
    """
    Fetch today's forecast for a location.

    Args:
        location: Coordinates as ``"lat,lon"``, e.g. ``"51.5229965,-0.0871299"``.
        address: Label copied into the result.
        scale: ``"celsius"`` or ``"fahrenheit"`` (``"farenheit"`` also accepted).
        is_test: Return ``SAMPLE_FORECAST`` without touching the network.
        http: Session to send the request on (default: shared session).
        api_key: Provider key (default: ``resolve_api_key()``).

    Returns:
        ``ForecastResult`` for the first day in the provider's daily block.

    Raises:
        InputError: ``location`` is not a valid ``"lat,lon"`` pair.
        ConfigurationError: No API key could be resolved.
        NetworkError: The request failed or returned nothing.
        PermanentError: The response is not a usable forecast.
    """
    if is_test:
        return SAMPLE_FORECAST

    request = ForecastRequest.build(location, address, scale)
    coords = request.coordinates

    settings = get_settings()
    key = api_key or resolve_api_key(settings)
    url = forecast_url(coords, key, settings.forecast_api_url)

    http = http if http is not None else session
    try:
        resp = http.get(url, params=build_forecast_params(request.scale))
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError("Something went wrong fetching forecast") from exc

    payload = _decode(resp)
    return parse_daily_forecast(payload, request)


def parse_daily_forecast(payload: dict[str, Any], request: ForecastRequest) -> ForecastResult:
    """
    Flatten the first ``daily.data`` entry into a ``ForecastResult``.

    Raises:
        PermanentError: No daily entries, or the entry is missing temperatures.
    """
    daily = payload.get("daily")
    entries = daily.get("data") if isinstance(daily, dict) else None
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        raise PermanentError("Forecast response has no daily data")

    day: dict[str, Any] = entries[0]
    try:
        return ForecastResult(
            location=request.location,
            address=request.address,
            weather_image=classify(day.get(client.ICON), day.get(client.PRECIP_INTENSITY)),
            weather_description=day.get(client.SUMMARY) or "",
            min=day.get(client.TEMPERATURE_MIN),
            max=day.get(client.TEMPERATURE_MAX),
            precip_type=day.get(client.PRECIP_TYPE),
            precip_probability=day.get(client.PRECIP_PROBABILITY) or 0.0,
            units=request.scale.units_label,
        )
    except (ValidationError, TypeError, ValueError) as exc:
        raise PermanentError(f"Unexpected daily forecast entry: {exc}") from exc


def _decode(resp: requests.Response) -> dict[str, Any]:
    if not resp.content:
        raise NetworkError("No forecast data returned")
    try:
        payload = resp.json()
    except ValueError as exc:
        raise PermanentError("there was an error parsing the forecast JSON") from exc
    if not payload:
        raise NetworkError("No forecast data returned")
    if not isinstance(payload, dict):
        raise PermanentError("Forecast response is not a JSON object")
    return payload
