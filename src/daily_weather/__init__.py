"""Daily Weather - today's forecast as a display icon, plus location validation.

Architecture::

    config.py      Settings (WEATHER_* env) and API key resolution (env → config.yml)
    schemas.py     Pydantic models: ForecastResult, IconCategory, Scale, Coordinates
    errors.py      ConfigurationError / NetworkError / PermanentError / InputError
    datasources/   External APIs (forecast.io forecast, World Weather Online search)
    services/      Shared HTTP session (single attempt, default timeout)
    cli.py         ``daily-weather`` command

Data flow: forecast API → fetch_forecast → classify icon → ForecastResult
"""

__version__ = "0.1.0"

from daily_weather.config import Settings, resolve_api_key
from daily_weather.datasources.forecast import classify, fetch_forecast
from daily_weather.datasources.search import is_location_valid
from daily_weather.errors import (
    ConfigurationError,
    InputError,
    NetworkError,
    PermanentError,
    WeatherError,
)
from daily_weather.schemas import SAMPLE_FORECAST, ForecastResult, IconCategory, Scale

__all__ = [
    "SAMPLE_FORECAST",
    "ConfigurationError",
    "ForecastResult",
    "IconCategory",
    "InputError",
    "NetworkError",
    "PermanentError",
    "Scale",
    "Settings",
    "WeatherError",
    "__version__",
    "classify",
    "fetch_forecast",
    "is_location_valid",
    "resolve_api_key",
]
