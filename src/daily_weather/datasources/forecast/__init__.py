"""Forecast provider data source (forecast.io / Dark Sky API).

Fetches today's forecast and maps its icon onto the app's display icons.

Public API:
  - forecast: fetch_forecast, parse_daily_forecast, build_forecast_params
  - conditions: classify (icon code + precipitation intensity → IconCategory)
  - client: API URL, requested/excluded blocks, response keys
"""

from daily_weather.datasources.forecast.client import FORECAST_API
from daily_weather.datasources.forecast.conditions import classify
from daily_weather.datasources.forecast.forecast import (
    build_forecast_params,
    fetch_forecast,
    parse_daily_forecast,
)

__all__ = [
    "FORECAST_API",
    "build_forecast_params",
    "classify",
    "fetch_forecast",
    "parse_daily_forecast",
]
