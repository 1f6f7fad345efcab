"""Forecast provider constants.

API docs: https://darksky.net/dev/docs (forecast.io, Dark Sky compatible)

Request shape::

    GET {FORECAST_API}/{api_key}/{lat},{lon}?units=uk&exclude=minutely,hourly,flags
"""

FORECAST_API = "https://api.forecast.io/forecast"

# Sub-payloads we never read; excluding them keeps the response small
EXCLUDE_BLOCKS = ["minutely", "hourly", "flags"]

# Daily-entry keys we read from ``daily.data[0]``
ICON = "icon"
SUMMARY = "summary"
TEMPERATURE_MIN = "temperatureMin"
TEMPERATURE_MAX = "temperatureMax"
PRECIP_TYPE = "precipType"
PRECIP_PROBABILITY = "precipProbability"
PRECIP_INTENSITY = "precipIntensity"
